# nexa/ticket/routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from nexa.core.database import Store, get_store
from nexa.ticket.schemas import TicketCreate, TicketDeleted, TicketOut, TicketUpdate
from nexa.ticket import services as ticket_service
from nexa.core.config import get_settings, Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tickets", tags=["Tickets"])

NOT_FOUND = "Ticket não encontrado"


def store_failure(message: str) -> HTTPException:
    logger.exception(message)
    return HTTPException(status_code=500, detail=message)


@router.get("/", response_model=list[TicketOut])
def list_all(store: Store = Depends(get_store)):
    """Lista todos os tickets, do mais recente para o mais antigo."""
    try:
        return ticket_service.get_all_tickets(store)
    except SQLAlchemyError:
        raise store_failure("Erro ao buscar tickets")


@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: int, store: Store = Depends(get_store)):
    try:
        ticket = ticket_service.get_ticket(store, ticket_id)
    except SQLAlchemyError:
        raise store_failure("Erro ao buscar ticket")
    if not ticket:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return ticket


@router.post("/", response_model=TicketOut, status_code=201)
def create(
    ticket: TicketCreate | None = None,
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Cria um novo ticket."""
    if ticket is None:
        ticket = TicketCreate()
    if not ticket.title or not ticket.priority:
        raise HTTPException(status_code=400, detail="Título e prioridade são obrigatórios")
    try:
        return ticket_service.create_ticket(store, ticket, settings.TICKET_DEFAULT_STATUS)
    except SQLAlchemyError:
        raise store_failure("Erro ao criar ticket")


@router.patch("/{ticket_id}", response_model=TicketOut)
def update(
    ticket_id: int,
    ticket: TicketUpdate | None = None,
    store: Store = Depends(get_store),
):
    """Atualiza título, prioridade e/ou status; campos omitidos mantêm o valor atual."""
    if ticket is None:
        ticket = TicketUpdate()
    try:
        updated = ticket_service.update_ticket(store, ticket_id, ticket)
    except SQLAlchemyError:
        raise store_failure("Erro ao atualizar ticket")
    if not updated:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return updated


@router.delete("/{ticket_id}", response_model=TicketDeleted)
def delete(ticket_id: int, store: Store = Depends(get_store)):
    try:
        deleted = ticket_service.delete_ticket(store, ticket_id)
    except SQLAlchemyError:
        raise store_failure("Erro ao deletar ticket")
    if not deleted:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return {"message": "Ticket deletado com sucesso", "ticket": deleted}
