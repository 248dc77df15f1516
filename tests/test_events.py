"""Events: upcoming/tag filters, date ordering, creation."""
from datetime import timedelta

from tuf_portal.models import Event


def add_event(db, creator, date, tags=None, title="Event"):
    event = Event(title=title, organizer="IEEE SB", date=date, tags=tags, created_by=creator.id)
    db.add(event)
    db.commit()
    db.refresh(event)
    return event.id


def test_upcoming_ieee_events_only(client, db_session, student_user, yesterday, tomorrow):
    add_event(db_session, student_user, yesterday, ["IEEE"], title="Past")
    future_id = add_event(db_session, student_user, tomorrow, ["IEEE"], title="Future")

    response = client.get("/api/events", params={"upcoming": "true", "tags": "IEEE"})
    assert response.status_code == 200
    data = response.json()
    assert [e["id"] for e in data] == [future_id]
    assert data[0]["creator"]["id"] == student_user.id


def test_events_ordered_by_date(client, db_session, student_user, yesterday, tomorrow):
    later = add_event(db_session, student_user, tomorrow + timedelta(days=5))
    soon = add_event(db_session, student_user, tomorrow)
    past = add_event(db_session, student_user, yesterday)
    data = client.get("/api/events").json()
    assert [e["id"] for e in data] == [past, soon, later]


def test_upcoming_false_does_not_filter(client, db_session, student_user, yesterday, tomorrow):
    add_event(db_session, student_user, yesterday)
    add_event(db_session, student_user, tomorrow)
    assert len(client.get("/api/events", params={"upcoming": "false"}).json()) == 2


def test_tags_match_any_listed_tag(client, db_session, student_user, tomorrow):
    ieee = add_event(db_session, student_user, tomorrow, ["IEEE", "Workshop"])
    acm = add_event(db_session, student_user, tomorrow + timedelta(hours=1), ["ACM"])
    add_event(db_session, student_user, tomorrow + timedelta(hours=2), ["Cultural"])
    add_event(db_session, student_user, tomorrow + timedelta(hours=3), None)

    data = client.get("/api/events", params={"tags": "IEEE,ACM"}).json()
    assert [e["id"] for e in data] == [ieee, acm]


def test_tag_does_not_match_longer_tag(client, db_session, student_user, tomorrow):
    add_event(db_session, student_user, tomorrow, ["IEEE-CS"])
    assert client.get("/api/events", params={"tags": "IEEE"}).json() == []


def test_create_event_stores_utc_and_owner(client, as_student):
    response = client.post(
        "/api/events",
        json={
            "title": "Hack Night",
            "organizer": "ACM",
            "date": "2026-11-01T10:00:00+05:30",
            "tags": ["ACM", "Hackathon"],
            "createdBy": "someone-else",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["createdBy"] == as_student.id
    assert data["date"].startswith("2026-11-01T04:30:00")
    assert data["tags"] == ["ACM", "Hackathon"]


def test_create_event_missing_date_is_400(client, as_student):
    response = client.post("/api/events", json={"title": "No date", "organizer": "ACM"})
    assert response.status_code == 400
