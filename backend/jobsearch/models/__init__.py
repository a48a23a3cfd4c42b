from jobsearch.models.contact import Contact, ContactRole
from jobsearch.models.activity import Activity
from jobsearch.models.job_opening import JobOpening, job_opening_contacts

__all__ = ["Contact", "ContactRole", "Activity", "JobOpening", "job_opening_contacts"]
