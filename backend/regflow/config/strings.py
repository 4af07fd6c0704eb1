# /regflow/config/strings.py

# User-facing response messages. Translation keys emitted into rendered
# elements live with the i18n mapper, not here.

FLOW_REGISTERED = "Flow definition registered successfully."
FLOW_COMPLETED = "Flow completed successfully."

MISSING_REGISTER_FIELDS = "appId and flowDefinition are required"
MISSING_INITIATE_FIELDS = "appId is required."
MISSING_SUBMIT_FIELDS = "appId, flowId, and action are required."
