import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError

from jobsearch.dependencies import get_contact_repository
from jobsearch.errors import NotFound
from jobsearch.models import Contact
from jobsearch.repositories import SqlAlchemyRepository
from jobsearch.schemas.contact import ContactCreate, ContactResponse, ContactUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contacts", tags=["contacts"])


def contact_to_response(contact: Contact) -> ContactResponse:
    return ContactResponse(
        id=contact.id,
        name=contact.name,
        phone=contact.phone,
        email=contact.email,
        notes=contact.notes,
        organization=contact.organization,
        role=contact.role,
    )


@router.post("", response_model=ContactResponse, status_code=201)
async def create_contact(req: ContactCreate, repository: SqlAlchemyRepository = Depends(get_contact_repository)):
    contact = Contact(**req.model_dump())
    repository.create(contact)
    repository.save()
    logger.info("Created contact %s", contact.id)
    return contact_to_response(contact)


@router.get("", response_model=list[ContactResponse])
async def list_contacts(repository: SqlAlchemyRepository = Depends(get_contact_repository)):
    return [contact_to_response(c) for c in repository.get_all()]


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(contact_id: int, repository: SqlAlchemyRepository = Depends(get_contact_repository)):
    contact = repository.get(contact_id)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact_to_response(contact)


@router.put("/{contact_id}", response_model=ContactResponse)
async def update_contact(contact_id: int, req: ContactUpdate,
                         repository: SqlAlchemyRepository = Depends(get_contact_repository)):
    contact = Contact(id=contact_id, **req.model_dump())
    try:
        repository.update(contact)
    except NotFound:
        raise HTTPException(status_code=404, detail="Contact not found")
    repository.save()
    return contact_to_response(repository.get(contact_id))


@router.delete("/{contact_id}")
async def delete_contact(contact_id: int, repository: SqlAlchemyRepository = Depends(get_contact_repository)):
    try:
        repository.delete(contact_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Contact not found")
    except IntegrityError:
        raise HTTPException(status_code=409, detail="Contact is still referenced by an activity")
    repository.save()
    return {"message": "Contact deleted"}
