"""Clubs, opportunities, IFP projects, quick links and discussion channels."""
from datetime import timedelta

from tuf_portal.models import Club, DiscussionChannel, Link, Opportunity, ProjectIfp
from tuf_portal.utils.datetime import naive_utc_now


def add(db, row):
    db.add(row)
    db.commit()
    db.refresh(row)
    return row.id


# ---------------------------------------------------------------------------
# Clubs
# ---------------------------------------------------------------------------

def test_clubs_by_category_sorted_by_name(client, db_session):
    acm = add(db_session, Club(name="SSN ACM Student Chapter", category="ACM"))
    ieee_b = add(db_session, Club(name="SSN IEEE WIE", category="IEEE"))
    ieee_a = add(db_session, Club(name="SSN IEEE Computer Society", category="IEEE"))

    assert [c["id"] for c in client.get("/api/clubs", params={"category": "IEEE"}).json()] == [ieee_a, ieee_b]
    assert [c["id"] for c in client.get("/api/clubs").json()] == [acm, ieee_a, ieee_b]


def test_create_club(client, as_student):
    response = client.post(
        "/api/clubs",
        json={"name": "SSN Coding Club", "category": "Technical", "meetingTime": "Tuesdays"},
    )
    assert response.status_code == 200
    assert response.json()["meetingTime"] == "Tuesdays"


def test_create_club_requires_auth(client):
    assert client.post("/api/clubs", json={"name": "X", "category": "Y"}).status_code == 401


def test_create_club_blank_name_is_400(client, as_student):
    assert client.post("/api/clubs", json={"name": "", "category": "IEEE"}).status_code == 400
    assert client.post("/api/clubs", json={"name": "   ", "category": "IEEE"}).status_code == 400
    assert client.get("/api/clubs").json() == []


# ---------------------------------------------------------------------------
# Opportunities
# ---------------------------------------------------------------------------

def test_opportunities_newest_first_and_by_type(client, db_session):
    now = naive_utc_now()
    old = add(db_session, Opportunity(type="Internship", title="Old", created_at=now - timedelta(days=3)))
    new = add(db_session, Opportunity(type="Internship", title="New", created_at=now))
    add(db_session, Opportunity(type="NPTEL", title="Course", created_at=now - timedelta(days=1)))

    data = client.get("/api/opportunities", params={"type": "Internship"}).json()
    assert [o["id"] for o in data] == [new, old]


def test_opportunities_by_tags(client, db_session):
    ml = add(db_session, Opportunity(type="Hackathon", title="ML Hack", tags=["ml", "ai"]))
    add(db_session, Opportunity(type="Hackathon", title="Web Hack", tags=["web"]))
    data = client.get("/api/opportunities", params={"tags": "ai"}).json()
    assert [o["id"] for o in data] == [ml]


def test_create_opportunity_with_deadline(client, as_student):
    response = client.post(
        "/api/opportunities",
        json={"type": "IFP", "title": "Summer IFP", "deadline": "2026-12-01", "tags": ["research"]},
    )
    assert response.status_code == 200
    assert response.json()["deadline"] == "2026-12-01"


def test_create_opportunity_bad_deadline_is_400(client, as_student):
    response = client.post("/api/opportunities", json={"type": "IFP", "title": "X", "deadline": "someday"})
    assert response.status_code == 400


# ---------------------------------------------------------------------------
# IFP projects
# ---------------------------------------------------------------------------

def project(**fields):
    data = {"title": "Project", "dept": "CSE", "area": "ML", "guide_name": "Dr. Rao",
            "contact": "rao@ssn.edu.in", "year": 2025}
    data.update(fields)
    return ProjectIfp(**data)


def test_projects_by_dept_and_area_latest_year_first(client, db_session):
    older = add(db_session, project(title="A", year=2024))
    newer = add(db_session, project(title="B", year=2025))
    add(db_session, project(title="C", dept="ECE"))
    add(db_session, project(title="D", area="Systems"))

    data = client.get("/api/projects-ifp", params={"dept": "CSE", "area": "ML"}).json()
    assert [p["id"] for p in data] == [newer, older]
    assert data[0]["guideName"] == "Dr. Rao"


def test_create_project_missing_guide_is_400(client, as_student):
    response = client.post(
        "/api/projects-ifp",
        json={"title": "X", "dept": "CSE", "area": "ML", "contact": "c", "year": 2025},
    )
    assert response.status_code == 400


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------

def test_links_by_group_and_search(client, db_session):
    site = add(db_session, Link(label="SSN Official Website", url="https://ssn.edu.in/", group="SSN"))
    add(db_session, Link(label="SSN LinkedIn", url="https://linkedin.com/school/ssn", group="SSN"))
    add(db_session, Link(label="Alumni Portal", url="https://alumni.ssn.edu.in/", group="Alumni"))

    data = client.get("/api/links", params={"group": "SSN", "search": "website"}).json()
    assert [l["id"] for l in data] == [site]


def test_links_sorted_by_group_then_label(client, db_session):
    b = add(db_session, Link(label="B", url="https://b.example", group="SSN"))
    a = add(db_session, Link(label="A", url="https://a.example", group="SSN"))
    alumni = add(db_session, Link(label="Z", url="https://z.example", group="Alumni"))
    assert [l["id"] for l in client.get("/api/links").json()] == [alumni, a, b]


def test_create_link_rejects_non_web_url(client, as_student):
    response = client.post("/api/links", json={"label": "Bad", "url": "javascript:alert(1)", "group": "SSN"})
    assert response.status_code == 400


def test_create_link(client, as_student):
    response = client.post("/api/links", json={"label": "Mail", "url": "mailto:office@ssn.edu.in", "group": "SSN"})
    assert response.status_code == 200
    assert response.json()["group"] == "SSN"


# ---------------------------------------------------------------------------
# Discussion channels
# ---------------------------------------------------------------------------

def test_discussions_by_platform_and_topic(client, db_session):
    add(db_session, DiscussionChannel(label="CP", platform="WhatsApp", url="https://chat.whatsapp.com/cp",
                                      topic_tags=["cp"]))
    placements = add(db_session, DiscussionChannel(label="Placements", platform="WhatsApp",
                                                   url="https://chat.whatsapp.com/p", topic_tags=["placements"]))
    add(db_session, DiscussionChannel(label="Interviews", platform="Discord", url="https://discord.gg/i",
                                      topic_tags=["placements"]))

    data = client.get("/api/discussions", params={"platform": "WhatsApp", "topicTags": "placements"}).json()
    assert [d["id"] for d in data] == [placements]
    assert data[0]["topicTags"] == ["placements"]


def test_create_discussion_channel(client, as_student):
    response = client.post(
        "/api/discussions",
        json={"label": "GATE Prep", "platform": "Telegram", "url": "https://t.me/gate", "topicTags": ["gate"]},
    )
    assert response.status_code == 200
    assert response.json()["topicTags"] == ["gate"]
