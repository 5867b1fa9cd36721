"""Replace the event catalog with a fixed set of sample conferences.

Every sample goes through the same normalization and store path as
POST /api/events, so slugs and UTC start instants match what the API
would produce. Existing events (and their bookings) are deleted first.
"""

import logging

from django.core.management.base import BaseCommand
from django.db import transaction

from events.domain.normalization import normalize_event_input
from events.models import Event
from events.stores import get_event_store

logger = logging.getLogger(__name__)

SAMPLE_EVENTS = [
    {
        "title": "React Summit 2026",
        "description": "The biggest React conference of the year featuring the latest innovations in the React ecosystem",
        "overview": "Two days of talks, workshops and networking on React Server Components, Suspense and the future of React.",
        "venue": "RAI Amsterdam Convention Centre",
        "location": "Amsterdam, Netherlands",
        "date": "2026-06-10",
        "time": "09:00",
        "timezone": "Europe/Amsterdam",
        "mode": "hybrid",
        "audience": "React developers, Frontend engineers, Full-stack developers",
        "agenda": [
            "09:00 AM | Registration and Coffee",
            "10:00 AM | Opening Keynote - The Future of React",
            "11:30 AM | React Server Components Deep Dive",
            "02:00 PM | Workshop: Building with Next.js 15",
            "05:30 PM | Networking Reception",
        ],
        "organizer": "GitNation",
        "tags": ["React", "JavaScript", "Web Development", "Frontend", "Conference"],
    },
    {
        "title": "Next.js Conf 2025",
        "description": "The official Next.js conference showcasing the latest features and best practices",
        "overview": "What's new in Next.js 15 and beyond: App Router, Server Actions and modern web patterns.",
        "venue": "Moscone Center",
        "location": "San Francisco, USA",
        "date": "2025-10-24",
        "time": "10:00",
        "timezone": "America/Los_Angeles",
        "mode": "hybrid",
        "audience": "Web developers, Full-stack engineers, Tech leads",
        "agenda": [
            "10:00 AM | Welcome & Registration",
            "11:00 AM | Keynote: Next.js 15 and Beyond",
            "02:00 PM | Deep Dive: Server Components & Actions",
            "05:00 PM | Q&A with Next.js Team",
        ],
        "organizer": "Vercel",
        "tags": ["Next.js", "React", "Web Development", "Vercel", "Conference"],
    },
    {
        "title": "AWS re:Invent 2025",
        "description": "Amazon's flagship cloud computing conference with hundreds of sessions and hands-on labs",
        "overview": "The largest cloud computing event of the year, with new AWS services, best practices and hands-on labs.",
        "venue": "The Venetian Convention Center",
        "location": "Las Vegas, USA",
        "date": "2025-11-30",
        "time": "08:00",
        "timezone": "America/Los_Angeles",
        "mode": "offline",
        "audience": "Cloud architects, DevOps engineers, Developers, IT professionals",
        "agenda": [
            "08:00 AM | Registration Opens",
            "09:00 AM | CEO Keynote",
            "02:00 PM | Hands-on Labs",
            "07:00 PM | re:Play Party",
        ],
        "organizer": "Amazon Web Services",
        "tags": ["AWS", "Cloud", "DevOps", "Infrastructure", "Conference"],
    },
    {
        "title": "Hack the North 2026",
        "description": "Canada's biggest hackathon bringing together 1000+ hackers for 36 hours of creation",
        "overview": "Build projects, learn from industry mentors and compete for prizes at the University of Waterloo.",
        "venue": "University of Waterloo Engineering Campus",
        "location": "Waterloo, Canada",
        "date": "2026-09-18",
        "time": "18:00",
        "timezone": "America/Toronto",
        "mode": "offline",
        "audience": "Students, Developers, Designers, Entrepreneurs",
        "agenda": [
            "06:00 PM | Check-in & Dinner",
            "08:00 PM | Hacking Begins",
            "02:00 PM | Hacking Ends",
            "06:00 PM | Closing Ceremony & Awards",
        ],
        "organizer": "Hack the North Team",
        "tags": ["Hackathon", "Student", "Innovation", "Coding", "Competition"],
    },
    {
        "title": "JSNation 2026",
        "description": "The ultimate JavaScript conference covering all aspects of the JS ecosystem",
        "overview": "Two days on JavaScript and Node.js: frameworks, backend, tooling and best practices.",
        "venue": "AFAS Live",
        "location": "Amsterdam, Netherlands",
        "date": "2026-06-03",
        "time": "09:00",
        "timezone": "Europe/Amsterdam",
        "mode": "hybrid",
        "audience": "JavaScript developers, Node.js developers, Full-stack engineers",
        "agenda": [
            "09:00 AM | Registration & Coffee",
            "11:00 AM | Modern JavaScript Patterns",
            "03:30 PM | TypeScript Deep Dive",
            "06:00 PM | Networking Drinks",
        ],
        "organizer": "GitNation",
        "tags": ["JavaScript", "Node.js", "TypeScript", "Web Development", "Conference"],
    },
    {
        "title": "KubeCon + CloudNativeCon EU 2026",
        "description": "The premier Kubernetes and cloud native conference in Europe",
        "overview": "The CNCF flagship conference on Kubernetes, containers and cloud native technologies.",
        "venue": "Messe Wien Exhibition & Congress Center",
        "location": "Vienna, Austria",
        "date": "2026-03-17",
        "time": "09:00",
        "timezone": "Europe/Vienna",
        "mode": "hybrid",
        "audience": "DevOps engineers, SREs, Platform engineers, Cloud architects",
        "agenda": [
            "09:00 AM | Registration",
            "10:00 AM | Welcome & Keynotes",
            "02:30 PM | Technical Deep Dives",
            "07:00 PM | Community Reception",
        ],
        "organizer": "Cloud Native Computing Foundation (CNCF)",
        "tags": ["Kubernetes", "Cloud Native", "DevOps", "Containers", "Conference"],
    },
    {
        "title": "Open Source Summit North America 2026",
        "description": "The premier conference for open source developers, technologists, and community leaders",
        "overview": "Open source from AI/ML to cloud infrastructure, and how to sustain the communities behind it.",
        "venue": "Austin Convention Center",
        "location": "Austin, USA",
        "date": "2026-04-13",
        "time": "08:30",
        "timezone": "America/Chicago",
        "mode": "hybrid",
        "audience": "Open source developers, Maintainers, Community managers, Tech leaders",
        "agenda": [
            "08:30 AM | Registration & Breakfast",
            "09:30 AM | Opening Keynote",
            "04:00 PM | Lightning Talks",
            "05:30 PM | Expo Hall Reception",
        ],
        "organizer": "The Linux Foundation",
        "tags": ["Open Source", "Linux", "Community", "Development", "Conference"],
    },
    {
        "title": "Google Cloud Next 2026",
        "description": "Google's premier cloud computing event featuring product announcements and hands-on learning",
        "overview": "Google Cloud Platform, AI/ML and enterprise solutions, with hands-on labs and expert sessions.",
        "venue": "Mandalay Bay Convention Center",
        "location": "Las Vegas, USA",
        "date": "2026-04-06",
        "time": "09:00",
        "timezone": "America/Los_Angeles",
        "mode": "hybrid",
        "audience": "Cloud developers, Data scientists, Enterprise architects, IT decision makers",
        "agenda": [
            "09:00 AM | Doors Open",
            "10:00 AM | CEO Keynote",
            "12:00 PM | Developer Keynote",
            "04:00 PM | Hands-on Labs",
        ],
        "organizer": "Google Cloud",
        "tags": ["Google Cloud", "GCP", "Cloud", "AI/ML", "Conference"],
    },
]


class Command(BaseCommand):
    help = "Delete all events and insert the sample conference catalog."

    def handle(self, *args, **options):
        store = get_event_store()

        with transaction.atomic():
            cleared, _ = Event.objects.all().delete()
            created = [store.create_event(normalize_event_input(payload)) for payload in SAMPLE_EVENTS]

        logger.info("Seeded %d event(s), cleared %d row(s)", len(created), cleared)
        self.stdout.write(f"Seeded {len(created)} event(s).")
        for index, event in enumerate(created, start=1):
            self.stdout.write(f"{index}. {event.title}")
            self.stdout.write(f"   Slug: {event.slug}")
            self.stdout.write(f"   Date: {event.date.isoformat()}")
            self.stdout.write(f"   StartAtUtc: {event.start_at_utc.isoformat()}")
