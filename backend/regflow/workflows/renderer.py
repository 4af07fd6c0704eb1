# /regflow/workflows/renderer.py

import structlog

from regflow.models.api import BlockOutput, RenderedNode
from regflow.models.flow import FlowDefinition, Node
from regflow.workflows.elements import transform_element

log = structlog.get_logger(__name__)


def render_node(definition: FlowDefinition, node: Node) -> RenderedNode:
    """
    Expand a node's element and block references into a flat, ordered render.

    A block reference emits the block descriptor and then each of its
    elements in the block's own order. References that resolve to neither a
    block nor an element are skipped so that a partially inconsistent
    definition still renders.
    """
    rendered = RenderedNode()

    for ref_id in node.elements:
        block = definition.find_block(ref_id)
        if block is not None:
            rendered.blocks.append(BlockOutput(id=block.id, nodes=list(block.nodes)))
            for element_id in block.nodes:
                element = definition.find_element(element_id)
                if element is None:
                    log.debug("Skipping unresolved block element.", node_id=node.id, block_id=block.id, element_id=element_id)
                    continue
                rendered.elements.append(transform_element(element, definition, node))
            continue

        element = definition.find_element(ref_id)
        if element is None:
            log.debug("Skipping unresolved element.", node_id=node.id, element_id=ref_id)
            continue
        rendered.elements.append(transform_element(element, definition, node))

    return rendered
