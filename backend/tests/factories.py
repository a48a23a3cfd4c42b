from datetime import datetime, timedelta

from jobsearch.models import Activity, Contact, ContactRole, JobOpening


def peter_smith() -> Contact:
    return Contact(
        name="Peter Smith",
        organization="Uber Recruiters",
        email="peter.smith@uberrecruiters.example",
        role=ContactRole.RECRUITER,
    )


def sarah_billingsley() -> Contact:
    return Contact(
        name="Sarah Billingsley",
        phone="555-0134",
        notes="Prefers email before a call.",
        organization="Acme Software",
        role=ContactRole.HIRING_MANAGER,
    )


def developer_opening() -> JobOpening:
    return JobOpening(
        title="Senior Developer",
        organization="Acme Software",
        url="https://jobs.example.com/acme/senior-developer",
        notes="Python and SQL heavy.",
        advertised_date=datetime(2026, 3, 2, 9, 0),
    )


def phone_screen(contact: Contact) -> Activity:
    return Activity(
        datetime(2026, 3, 9, 14, 30),
        timedelta(minutes=30),
        contact,
        "Phone screen with the recruiter.",
    )
