from datetime import datetime, timedelta

from jobsearch.errors import InvalidArgument
from jobsearch.models import Activity, Contact, JobOpening

APPLICATION_DESCRIPTION = "Applied."
APPLICATION_FOLLOW_UP_DELAY = timedelta(days=3)
APPLICATION_FOLLOW_UP_DURATION = timedelta(minutes=15)
APPLICATION_FOLLOW_UP_DESCRIPTION = (
    "Application follow up. Reach out to the advertiser to ensure they have "
    "your details and answer any questions."
)

INTERVIEW_FOLLOW_UP_DELAY = timedelta(days=1)
INTERVIEW_FOLLOW_UP_DURATION = timedelta(minutes=15)
INTERVIEW_FOLLOW_UP_DESCRIPTION = (
    "Interview follow up. Thank the interviewers for their time and ask if "
    "you can help them further."
)


def apply(job_opening: JobOpening, application_time: datetime, contact: Contact) -> None:
    """Record an application and schedule the follow-up three days later."""
    if job_opening is None:
        raise InvalidArgument("job_opening cannot be None")
    if contact is None:
        raise InvalidArgument("contact cannot be None")
    if application_time is None:
        raise InvalidArgument("application_time cannot be None")

    applied = Activity(application_time, timedelta(0), contact, APPLICATION_DESCRIPTION,
                       completed=True)
    follow_up = Activity(application_time + APPLICATION_FOLLOW_UP_DELAY,
                         APPLICATION_FOLLOW_UP_DURATION, contact,
                         APPLICATION_FOLLOW_UP_DESCRIPTION)
    job_opening.activities.extend([applied, follow_up])


def add_interview(job_opening: JobOpening, start: datetime, duration: timedelta,
                  contact: Contact, description: str) -> None:
    """Record an interview and schedule the thank-you follow-up a day later."""
    if job_opening is None:
        raise InvalidArgument("job_opening cannot be None")
    if contact is None:
        raise InvalidArgument("contact cannot be None")
    if start is None:
        raise InvalidArgument("start cannot be None")
    if description is None or not description.strip():
        raise InvalidArgument("description cannot be blank")
    if duration is None or duration < timedelta(0):
        raise InvalidArgument("duration must be zero or positive")

    interview = Activity(start, duration, contact, description)
    follow_up = Activity(start + INTERVIEW_FOLLOW_UP_DELAY, INTERVIEW_FOLLOW_UP_DURATION,
                         contact, INTERVIEW_FOLLOW_UP_DESCRIPTION)
    job_opening.activities.extend([interview, follow_up])
