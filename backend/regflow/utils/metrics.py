# /regflow/utils/metrics.py

from prometheus_client import Counter, Histogram, Gauge

# This file defines all Prometheus metrics used for service monitoring.

# Flow Metrics
flows_initiated_counter = Counter('flows_initiated_total', 'Flows initiated', ['app_id'])
flow_actions_counter = Counter('flow_actions_total', 'Submitted flow actions', ['action_type', 'status'])
flows_completed_counter = Counter('flows_completed_total', 'Flows completed')
definitions_registered_counter = Counter('flow_definitions_registered_total', 'Flow definitions registered')
active_sessions_gauge = Gauge('active_flow_sessions', 'Number of flow sessions not yet completed')

# Performance Metrics
response_time_histogram = Histogram('response_time_seconds', 'Response time in seconds', ['endpoint'])
