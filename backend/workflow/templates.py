"""Starter workflows shown in the editor's template gallery."""

TEMPLATES = [
    {
        "id": "lead-to-crm",
        "name": "Lead to CRM",
        "description": "Automatically add new leads to CRM and notify sales team",
        "category": "sales",
        "nodes": [
            {"id": "1", "type": "trigger", "label": "Form Submitted",
             "config": {"form": "Contact Form"}, "position": {"x": 100, "y": 100}},
            {"id": "2", "type": "action", "label": "Create CRM Contact",
             "config": {"platform": "salesforce"}, "position": {"x": 300, "y": 100}},
            {"id": "3", "type": "action", "label": "Send Email to Sales",
             "config": {"to": "sales@company.com"}, "position": {"x": 500, "y": 100}},
        ],
        "edges": [
            {"id": "e1-2", "source": "1", "target": "2"},
            {"id": "e2-3", "source": "2", "target": "3"},
        ],
    },
    {
        "id": "support-ticket",
        "name": "Support Ticket Automation",
        "description": "Auto-respond to support tickets and create tasks",
        "category": "support",
        "nodes": [
            {"id": "1", "type": "trigger", "label": "Email Received",
             "config": {"inbox": "support@"}, "position": {"x": 100, "y": 100}},
            {"id": "2", "type": "action", "label": "Send Auto-Reply",
             "config": {"template": "support-ack"}, "position": {"x": 300, "y": 100}},
            {"id": "3", "type": "condition", "label": "Priority Check",
             "config": {"field": "priority", "value": "high"}, "position": {"x": 500, "y": 100}},
            {"id": "4", "type": "action", "label": "Notify Team",
             "config": {"channel": "#support-urgent"}, "position": {"x": 700, "y": 50}},
            {"id": "5", "type": "action", "label": "Create Ticket",
             "config": {"system": "zendesk"}, "position": {"x": 700, "y": 150}},
        ],
        "edges": [
            {"id": "e1-2", "source": "1", "target": "2"},
            {"id": "e2-3", "source": "2", "target": "3"},
            {"id": "e3-4", "source": "3", "target": "4", "label": "Yes"},
            {"id": "e3-5", "source": "3", "target": "5", "label": "No"},
        ],
    },
]
