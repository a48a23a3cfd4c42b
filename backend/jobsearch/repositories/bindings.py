from jobsearch.models import Activity, Contact, JobOpening
from jobsearch.repositories.binding import EntityBinding


def _set_id(item, item_id: int):
    item.id = item_id


CONTACTS: EntityBinding[int, Contact] = EntityBinding(
    name="contact",
    get_id=lambda contact: contact.id,
    set_id=_set_id,
    clone=Contact.clone,
    collection=lambda session: session.query(Contact).order_by(Contact.id),
    id_matches=lambda contact_id: Contact.id == contact_id,
)

ACTIVITIES: EntityBinding[int, Activity] = EntityBinding(
    name="activity",
    get_id=lambda activity: activity.id,
    set_id=_set_id,
    clone=Activity.clone,
    collection=lambda session: session.query(Activity).order_by(Activity.start, Activity.id),
    id_matches=lambda activity_id: Activity.id == activity_id,
)

JOB_OPENINGS: EntityBinding[int, JobOpening] = EntityBinding(
    name="job opening",
    get_id=lambda job_opening: job_opening.id,
    set_id=_set_id,
    clone=JobOpening.clone,
    collection=lambda session: session.query(JobOpening).order_by(JobOpening.id),
    id_matches=lambda job_opening_id: JobOpening.id == job_opening_id,
)
