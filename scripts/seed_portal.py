"""Seed the portal directory collections (idempotent).

Usage examples:
  python scripts/seed_portal.py
  DATABASE_URL=postgresql://... python scripts/seed_portal.py --only clubs links
  python scripts/seed_portal.py --url sqlite:///./dev.db --dry-run

Behavior:
  - Inserts clubs, quick links and discussion channels that are not present yet.
  - A row counts as present when its natural key matches (club name, link url,
    channel url); existing rows are left untouched.
  - Safe to re-run. --dry-run rolls back instead of committing.
"""
from __future__ import annotations
import argparse
import os
import sys
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

sys.path.append(str(Path(__file__).resolve().parents[1]))
from tuf_portal.models import Club, DiscussionChannel, Link  # noqa: E402

CLUBS = [
    {"name": "TechClub SSN", "category": "Technical", "instagram": "https://instagram.com/techclub_ssn",
     "email": "techclub@ssn.edu.in", "meeting_time": "Every Friday, 4:00 PM",
     "description": "Workshops, hackathons and project development."},
    {"name": "SSN IEEE Computer Society", "category": "IEEE", "instagram": "https://instagram.com/ssn_ieee_cs",
     "email": "ieee.cs@ssn.edu.in", "meeting_time": "Bi-weekly Wednesdays, 3:30 PM",
     "description": "Computer science and engineering initiatives of the IEEE student branch."},
    {"name": "SSN ACM Student Chapter", "category": "ACM", "instagram": "https://instagram.com/ssn_acm",
     "email": "acm@ssn.edu.in", "meeting_time": "Monthly meetings",
     "description": "Programming contests and technical events."},
    {"name": "SSN Coding Club", "category": "Technical", "instagram": "https://instagram.com/ssn_coding",
     "email": "coding@ssn.edu.in", "meeting_time": "Tuesday & Thursday, 5:00 PM",
     "description": "Competitive programming and code challenges."},
    {"name": "SSN Photo Club", "category": "Cultural", "instagram": "https://instagram.com/ssn_photoclub",
     "email": "photography@ssn.edu.in", "meeting_time": "Weekends, flexible timings",
     "description": "Photography walks and exhibitions."},
]

LINKS = [
    {"label": "SSN Official Website", "url": "https://ssn.edu.in/", "group": "SSN"},
    {"label": "SSN LinkedIn", "url": "https://www.linkedin.com/school/ssn-college-of-engineering/", "group": "SSN"},
    {"label": "Instincts Official Page", "url": "https://instincts.ssn.edu.in/", "group": "Flagship"},
    {"label": "Invente Official Page", "url": "https://invente.ssn.edu.in/", "group": "Flagship"},
    {"label": "Alumni Portal", "url": "https://alumni.ssn.edu.in/", "group": "Alumni"},
    {"label": "IEEE SSN SB", "url": "https://www.instagram.com/ieee_ssn/", "group": "IEEE"},
    {"label": "SSN ACM", "url": "https://www.instagram.com/ssn_acm/", "group": "ACM"},
]

DISCUSSIONS = [
    {"label": "SSN Placements Official", "platform": "WhatsApp",
     "url": "https://chat.whatsapp.com/placement-official", "topic_tags": ["placements"]},
    {"label": "Interview Experiences", "platform": "Discord",
     "url": "https://discord.gg/ssn-interviews", "topic_tags": ["placements", "interviews"]},
    {"label": "Resume Reviews", "platform": "Telegram",
     "url": "https://t.me/ssn_resume_reviews", "topic_tags": ["placements", "resume"]},
    {"label": "SSN Hackathon Hub", "platform": "Discord",
     "url": "https://discord.gg/ssn-hackathons", "topic_tags": ["hackathons"]},
    {"label": "Competitive Programming", "platform": "WhatsApp",
     "url": "https://chat.whatsapp.com/cp-ssn", "topic_tags": ["cp", "dsa"]},
    {"label": "GATE Preparation", "platform": "Telegram",
     "url": "https://t.me/ssn_gate_prep", "topic_tags": ["gate"]},
]

# collection name -> (model, natural key column, rows)
COLLECTIONS = {
    "clubs": (Club, "name", CLUBS),
    "links": (Link, "url", LINKS),
    "discussions": (DiscussionChannel, "url", DISCUSSIONS),
}


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--url", default=os.getenv("DATABASE_URL"), help="Database URL (env DATABASE_URL by default)")
    p.add_argument("--only", nargs="+", choices=sorted(COLLECTIONS), help="Seed only these collections")
    p.add_argument("--dry-run", action="store_true", help="Run without committing DB writes")
    return p.parse_args()


def seed_collection(session, model, key: str, rows: list[dict]) -> int:
    column = getattr(model, key)
    existing = {value for (value,) in session.query(column).all()}
    inserted = 0
    for row in rows:
        if row[key] in existing:
            continue
        session.add(model(**row))
        existing.add(row[key])
        inserted += 1
    session.flush()
    return inserted


def main():
    args = parse_args()
    if not args.url:
        print("ERROR: Provide --url or set DATABASE_URL", file=sys.stderr)
        sys.exit(2)

    print(f"[seed_portal] Connecting to database: {args.url}")
    engine = create_engine(args.url)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()

    names = args.only or sorted(COLLECTIONS)
    counts = {}
    try:
        for name in names:
            model, key, rows = COLLECTIONS[name]
            counts[name] = seed_collection(session, model, key, rows)
            print(f"{name}: {counts[name]} new, {len(rows) - counts[name]} already present")

        if args.dry_run:
            print(f"Dry run active: rolling back changes ({counts})")
            session.rollback()
        else:
            session.commit()
            print(f"Commit complete ({counts})")
    except SQLAlchemyError as e:
        session.rollback()
        print(f"ERROR: seeding failed: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        session.close()


if __name__ == "__main__":
    main()
