from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException

from soar.api.schemas import ViewUpdate
from soar.api.serializers import (
    serialize_edges,
    serialize_kind_styles,
    serialize_model,
    serialize_node_flat,
    serialize_nodes_flat,
)
from soar.query.graph import count_edge_kinds, count_node_kinds
from soar.sample_data import sample_payload
from soar.schema.consistency import check_references
from soar.schema.validation import validate_analysis, validate_architecture
from soar.view.state import ViewSession

logger = structlog.get_logger()

router = APIRouter()

# One viewer session per process
_session = ViewSession()


def get_session() -> ViewSession:
    return _session


def _require_architecture(session: ViewSession):
    if session.architecture is None:
        raise HTTPException(status_code=404, detail="No architecture loaded")
    return session.architecture


# ============================
# Validation
# ============================

@router.post("/validate")
def validate(payload: Any = Body(...)):
    return validate_analysis(payload).to_dict()


@router.post("/validate/architecture")
def validate_bare_architecture(payload: Any = Body(...)):
    return validate_architecture(payload).to_dict()


@router.get("/sample")
def sample():
    return sample_payload()


@router.get("/kinds")
def kinds():
    return serialize_kind_styles()


# ============================
# Loaded architecture
# ============================

@router.put("/architecture")
def load_architecture(
    payload: Any = Body(...),
    architecture_only: bool = False,
    session: ViewSession = Depends(get_session),
):
    session.set_loading(True)
    result = validate_architecture(payload) if architecture_only else validate_analysis(payload)

    if not result.success:
        session.set_error(f"{len(result.errors)} validation error(s)")
        logger.warning("architecture_rejected", errors=len(result.errors))
        raise HTTPException(
            status_code=422,
            detail={"errors": [e.to_dict() for e in result.errors]},
        )

    architecture = result.data.architecture
    session.set_architecture(architecture)
    session.set_loading(False)

    report = check_references(architecture)
    logger.info(
        "architecture_loaded",
        name=architecture.name,
        nodes=report.stats["nodes"],
        edges=report.stats["edges"],
        issues=len(report.issues),
    )

    return {
        "name": architecture.name,
        "version": architecture.version,
        "summary": result.data.summary,
        "nodeKinds": count_node_kinds(architecture),
        "edgeKinds": count_edge_kinds(architecture),
        "consistency": report.to_dict(),
    }


@router.get("/architecture")
def get_architecture(session: ViewSession = Depends(get_session)):
    return serialize_model(_require_architecture(session))


@router.get("/nodes/{node_id}")
def get_node(node_id: str, session: ViewSession = Depends(get_session)):
    _require_architecture(session)
    node = session.get_node(node_id)
    if node is None:
        raise HTTPException(status_code=404, detail=f"Node '{node_id}' not found")
    return serialize_node_flat(node)


@router.get("/nodes/{node_id}/connections")
def get_node_connections(node_id: str, session: ViewSession = Depends(get_session)):
    _require_architecture(session)
    return serialize_edges(session.get_node_connections(node_id))


@router.post("/nodes/{node_id}/toggle")
def toggle_node(node_id: str, session: ViewSession = Depends(get_session)):
    expanded = session.toggle_node_expanded(node_id)
    return {"nodeId": node_id, "expanded": expanded}


# ============================
# View state
# ============================

@router.get("/view")
def get_view(session: ViewSession = Depends(get_session)):
    return session.to_dict()


@router.patch("/view")
def update_view(update: ViewUpdate, session: ViewSession = Depends(get_session)):
    changed = update.model_fields_set

    if "detail_level" in changed and update.detail_level is not None:
        session.set_detail_level(update.detail_level)
    if "selected_node_id" in changed:
        session.select_node(update.selected_node_id)
    if "hovered_node_id" in changed:
        session.hover_node(update.hovered_node_id)
    if update.show_connections is not None:
        session.set_show_connections(update.show_connections)
    if update.show_labels is not None:
        session.set_show_labels(update.show_labels)
    if update.animate_connections is not None:
        session.set_animate_connections(update.animate_connections)
    if update.camera_position is not None:
        session.set_camera_position(update.camera_position)

    return session.to_dict()


@router.get("/visible")
def get_visible(session: ViewSession = Depends(get_session)):
    _require_architecture(session)
    return {
        "detailLevel": session.detail_level.value,
        "nodes": serialize_nodes_flat(session.get_visible_nodes()),
    }
