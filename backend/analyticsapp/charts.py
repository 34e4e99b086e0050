"""Fixed demo figures for the dashboard charts and activity feed."""
from datetime import timedelta

from django.utils import timezone

DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def _series(label, data, rgb):
    return {
        "labels": DAYS,
        "datasets": [{
            "label": label,
            "data": data,
            "backgroundColor": f"rgba({rgb}, 0.5)",
            "borderColor": f"rgb({rgb})",
        }],
    }


def chart_data():
    return {
        "revenue": _series("Revenue", [12500, 15300, 18200, 14800, 21000, 19500, 23400], "59, 130, 246"),
        "customers": _series("New Customers", [8, 12, 15, 10, 18, 14, 20], "34, 197, 94"),
        "automations": _series("Automations", [45, 52, 61, 58, 73, 68, 82], "168, 85, 247"),
        "categories": {
            "labels": ["CRM", "Marketing", "Support", "Operations"],
            "datasets": [{
                "label": "Usage by Category",
                "data": [35, 28, 22, 15],
                "backgroundColor": [
                    "rgba(59, 130, 246, 0.8)",
                    "rgba(34, 197, 94, 0.8)",
                    "rgba(251, 146, 60, 0.8)",
                    "rgba(168, 85, 247, 0.8)",
                ],
            }],
        },
    }


# (type, action, description, minutes ago)
ACTIVITY = [
    ("workflow", "created", 'Created workflow "Lead to CRM"', 5),
    ("automation", "executed", "Sent email notification", 15),
    ("workflow", "executed", 'Executed "Support Ticket Automation"', 30),
    ("chat", "conversation", "Started conversation with Cyberque", 45),
    ("automation", "simulated", "Simulated SMS notification", 60),
]


def activity_feed(now=None):
    now = now or timezone.now()
    return [
        {
            "id": i,
            "type": kind,
            "action": action,
            "user": "Demo User",
            "description": description,
            "timestamp": (now - timedelta(minutes=minutes)).isoformat(),
        }
        for i, (kind, action, description, minutes) in enumerate(ACTIVITY, start=1)
    ]
