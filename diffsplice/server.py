"""
diffsplice - Servicio HTTP
Servidor FastAPI que expone el motor de diffs a la interfaz de escritorio
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from diffsplice import __version__
from diffsplice.config.settings import settings
from diffsplice.core import (
    create_change_group_patch,
    create_hunk_patch,
    parse_diff_report_async,
    parse_hunks,
    select_change_group,
    select_hunk,
)
from diffsplice.exceptions import DiffLookupError, DiffTargetNotFoundException

# Configurar logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="diffsplice API",
    description="Parseo de unified diffs y reconstrucción de parches por hunk o grupo de cambios",
    version=__version__,
)

# La interfaz de escritorio corre en local
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Modelos de datos para las solicitudes
class ParseDiffRequest(BaseModel):
    diff: str = ""
    validate_counts: Optional[bool] = None

class ParseHunksRequest(BaseModel):
    patch: str = ""

class HunkPatchRequest(BaseModel):
    file_path: str
    patch: str
    hunk_index: int = Field(0, ge=0)

class GroupPatchRequest(HunkPatchRequest):
    group_index: int = Field(0, ge=0)

class PatchResponse(BaseModel):
    patch: str


def _select(patch: str, hunk_index: int, group_index: Optional[int] = None):
    """Busca el hunk (y el grupo) pedidos; 404 si no existen."""
    hunks = parse_hunks(patch)
    try:
        hunk = select_hunk(hunks, hunk_index)
        group = select_change_group(hunk, group_index) if group_index is not None else None
    except DiffLookupError as e:
        logger.info(f"Objetivo no encontrado: {e}")
        raise DiffTargetNotFoundException(str(e))
    return hunk, group


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "diffsplice"}


@app.post("/diff/files")
async def split_files(request: ParseDiffRequest) -> Dict[str, Any]:
    """Divide un diff multi-archivo en parches por archivo"""
    report = await parse_diff_report_async(request.diff, request.validate_counts)
    logger.info(f"Diff dividido en {len(report.files)} archivos ({len(report.skipped)} descartados)")
    return {
        "files": [{"path": f.path, "patch": f.patch} for f in report.files],
        "skipped": [vars(s) for s in report.skipped],
        "count_mismatches": [vars(m) for m in report.count_mismatches],
    }


@app.post("/diff/hunks")
def list_hunks(request: ParseHunksRequest) -> Dict[str, List[Dict[str, Any]]]:
    """Devuelve los hunks de un parche de un solo archivo"""
    return {"hunks": [h.to_dict() for h in parse_hunks(request.patch)]}


@app.post("/diff/hunk-patch", response_model=PatchResponse)
def hunk_patch(request: HunkPatchRequest) -> PatchResponse:
    """Genera un parche independiente para un hunk"""
    hunk, _ = _select(request.patch, request.hunk_index)
    return PatchResponse(patch=create_hunk_patch(request.file_path, hunk, request.patch))


@app.post("/diff/group-patch", response_model=PatchResponse)
def group_patch(request: GroupPatchRequest) -> PatchResponse:
    """Genera un parche independiente para un grupo de cambios"""
    hunk, group = _select(request.patch, request.hunk_index, request.group_index)
    return PatchResponse(
        patch=create_change_group_patch(request.file_path, hunk, group, request.patch)
    )
