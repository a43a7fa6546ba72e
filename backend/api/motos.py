"""Moto API routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from api.params import EntityId, PageNumber, PageSize
from db import get_db
from repositories.moto_repository import (
    count_motos,
    create_moto as repo_create_moto,
    delete_moto as repo_delete_moto,
    get_moto,
    list_motos as repo_list_motos,
    update_moto as repo_update_moto,
)
from schemas.common import PagedResponse
from schemas.motos import MotoCreate, MotoResponse, MotoUpdate
from schemas.statuses import StatusSummary
from schemas.yards import YardResponse
from schemas.zones import ZoneResponse
from utils.pagination import normalize_pagination, page_offset, to_paged
from utils.validators import validate_moto

LOG = logging.getLogger(__name__)

BASE_PATH = "/api/motos"
NOT_FOUND = "Moto não encontrada"

router = APIRouter(prefix="/motos", tags=["motos"])


def _moto_to_response(m) -> MotoResponse:
    """Build MotoResponse, embedding zone, yard and status summaries when loaded."""
    return MotoResponse(
        id=m.id,
        placa=m.placa,
        chassi=m.chassi,
        qrCode=m.qr_code,
        dataEntrada=m.data_entrada,
        previsaoEntrega=m.previsao_entrega,
        fotos=m.fotos,
        zonaId=m.zona_id,
        patioId=m.patio_id,
        statusId=m.status_id,
        observacoes=m.observacoes,
        zona=ZoneResponse(id=m.zona.id, nome=m.zona.nome, letra=m.zona.letra) if m.zona else None,
        patio=YardResponse(id=m.patio.id, nome=m.patio.nome) if m.patio else None,
        status=(
            StatusSummary(id=m.status.id, nome=m.status.nome, statusGrupoId=m.status.status_grupo_id)
            if m.status
            else None
        ),
    )


def _moto_fields(body: MotoCreate) -> dict:
    """Map API payload to repository keyword arguments."""
    return {
        "placa": body.placa,
        "chassi": body.chassi,
        "qr_code": body.qrCode,
        "data_entrada": body.dataEntrada,
        "previsao_entrega": body.previsaoEntrega,
        "fotos": body.fotos,
        "zona_id": body.zonaId,
        "patio_id": body.patioId,
        "status_id": body.statusId,
        "observacoes": body.observacoes,
    }


def _validate(db: Session, body: MotoCreate, exclude_id: Optional[int] = None) -> None:
    error = validate_moto(
        db,
        zona_id=body.zonaId,
        patio_id=body.patioId,
        status_id=body.statusId,
        placa=body.placa,
        chassi=body.chassi,
        exclude_id=exclude_id,
    )
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)


@router.get("", response_model=PagedResponse[MotoResponse])
def list_motos(
    request: Request,
    page: PageNumber = 1,
    page_size: PageSize = 20,
    placa: Optional[str] = None,
    db: Session = Depends(get_db),
) -> PagedResponse:
    """List motos (paginated). placa filters by case-insensitive substring of the plate."""
    page, page_size = normalize_pagination(page, page_size)
    total = count_motos(db, placa=placa)
    motos = repo_list_motos(db, page_offset(page, page_size), page_size, placa=placa)
    return to_paged(
        request,
        [_moto_to_response(m) for m in motos],
        page,
        page_size,
        total,
        BASE_PATH,
        extra_query={"placa": placa},
    )


@router.get("/{moto_id}", response_model=MotoResponse)
def get_moto_by_id(moto_id: EntityId, db: Session = Depends(get_db)) -> MotoResponse:
    """Get a moto by id."""
    moto = get_moto(db, moto_id)
    if moto is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return _moto_to_response(moto)


@router.post("", response_model=MotoResponse, status_code=status.HTTP_201_CREATED)
def create_moto(body: MotoCreate, response: Response, db: Session = Depends(get_db)) -> MotoResponse:
    """Register a moto. Zone, yard and status must exist; plate and chassis must be unused."""
    _validate(db, body)
    moto = repo_create_moto(db, **_moto_fields(body))
    LOG.info("Created moto %s (placa=%s)", moto.id, moto.placa)
    response.headers["Location"] = f"{BASE_PATH}/{moto.id}"
    return _moto_to_response(moto)


@router.put("/{moto_id}", response_model=MotoResponse)
def update_moto(moto_id: EntityId, body: MotoUpdate, db: Session = Depends(get_db)) -> MotoResponse:
    """Replace all fields of a moto."""
    if get_moto(db, moto_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    _validate(db, body, exclude_id=moto_id)
    moto = repo_update_moto(db, moto_id, **_moto_fields(body))
    LOG.info("Updated moto %s", moto_id)
    return _moto_to_response(moto)


@router.delete("/{moto_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_moto(moto_id: EntityId, db: Session = Depends(get_db)) -> None:
    """Delete a moto."""
    if not repo_delete_moto(db, moto_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    LOG.info("Deleted moto %s", moto_id)
