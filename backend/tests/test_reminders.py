from apscheduler.schedulers.background import BackgroundScheduler
import pytest

from habitflow.services.notifications import NotificationService, ReminderScheduler, format_reminder


OWNER = "+33612345678"


@pytest.fixture
def sent():
    return []


@pytest.fixture
def reminders(sent):
    def callback(recipient, message):
        sent.append((recipient, message))
        return True

    return ReminderScheduler(
        scheduler=BackgroundScheduler(timezone="Europe/Paris"),
        enabled=True,
        send_callback=callback,
        timezone="Europe/Paris"
    )


async def test_schedule_registers_daily_job(reminders):
    await reminders.schedule("h1", "Read", "📖", "09:30", recipient=OWNER)

    job = reminders.get_job("h1")
    assert job is not None
    assert "hour='9'" in str(job.trigger)
    assert "minute='30'" in str(job.trigger)
    assert job.name == "📖 Read"


async def test_schedule_accepts_database_time_format(reminders):
    await reminders.schedule("h1", "Read", "📖", "21:05:00", recipient=OWNER)

    assert "hour='21'" in str(reminders.get_job("h1").trigger)


async def test_schedule_replaces_existing_job(reminders):
    await reminders.schedule("h1", "Read", "📖", "09:00", recipient=OWNER)
    await reminders.schedule("h1", "Read more", "📚", "10:00", recipient=OWNER)

    jobs = reminders.scheduler.get_jobs()
    assert len(jobs) == 1
    assert jobs[0].args == ("Read more", "📚", OWNER)
    assert "hour='10'" in str(jobs[0].trigger)


async def test_invalid_time_is_logged_not_raised(reminders):
    await reminders.schedule("h1", "Read", "📖", "later", recipient=OWNER)

    assert reminders.get_job("h1") is None


async def test_fired_job_sends_reminder(reminders, sent):
    await reminders.schedule("h1", "Read", "📖", "09:00", recipient=OWNER)
    job = reminders.get_job("h1")

    job.func(*job.args)

    assert len(sent) == 1
    recipient, message = sent[0]
    assert recipient == OWNER
    assert message.startswith("📖 Read")


async def test_schedule_uses_owner_timezone(reminders):
    await reminders.schedule("h1", "Read", "📖", "07:15", recipient=OWNER, timezone="America/New_York")
    await reminders.schedule("h2", "Run", "🏃", "07:15", recipient=OWNER)

    assert str(reminders.get_job("h1").trigger.timezone) == "America/New_York"
    assert str(reminders.get_job("h2").trigger.timezone) == "Europe/Paris"


async def test_schedule_without_owner_contact_removes_reminder(reminders):
    await reminders.schedule("h1", "Read", "📖", "09:00", recipient=OWNER)

    await reminders.schedule("h1", "Read", "📖", "10:00")

    assert reminders.get_job("h1") is None


async def test_each_owner_gets_their_own_reminder(reminders, sent):
    await reminders.schedule("h1", "Read", "📖", "09:00", recipient="+33611111111")
    await reminders.schedule("h2", "Run", "🏃", "09:00", recipient="+14155550100")

    for job in reminders.scheduler.get_jobs():
        job.func(*job.args)

    assert sorted(recipient for recipient, _ in sent) == ["+14155550100", "+33611111111"]
    assert [m for r, m in sent if r == "+33611111111"][0].startswith("📖 Read")


async def test_cancel_and_cancel_all(reminders):
    await reminders.schedule("h1", "Read", "📖", "09:00", recipient=OWNER)
    await reminders.schedule("h2", "Run", "🏃", "07:00", recipient=OWNER)

    await reminders.cancel("h1")
    await reminders.cancel("unknown")

    assert reminders.get_job("h1") is None
    assert reminders.get_job("h2") is not None

    await reminders.cancel_all()

    assert reminders.scheduler.get_jobs() == []


async def test_disabled_scheduler_is_noop():
    reminders = ReminderScheduler(scheduler=BackgroundScheduler(), enabled=False)

    await reminders.schedule("h1", "Read", "📖", "09:00", recipient=OWNER)
    await reminders.cancel("h1")
    await reminders.cancel_all()
    reminders.start()

    assert reminders.scheduler.get_jobs() == []
    assert not reminders.scheduler.running


def test_notification_without_callback_is_not_sent():
    assert NotificationService().send_reminder("Read", "📖") is False


def test_notification_without_recipient_is_not_sent():
    calls = []

    def callback(recipient, message):
        calls.append(recipient)
        return True

    assert NotificationService(callback).send_reminder("Read", "📖") is False
    assert calls == []


def test_notification_callback_failure_is_reported():
    def failing(recipient, message):
        raise RuntimeError("boom")

    assert NotificationService(failing).send_notification("hi", OWNER) is False


def test_format_reminder_localized():
    assert format_reminder("Read", "📖", locale="en") == "📖 Read\n\nTime to practice your habit!"
    assert "C'est l'heure" in format_reminder("Read", "📖", locale="fr")
