# Pre-built automations shown in the portal. Templates use {{placeholders}}
# that the frontend fills in before calling /api/automation/execute.
SERVICES = [
    {
        "id": "lead-notification",
        "name": "Lead Notification",
        "category": "crm",
        "description": "Instantly notify sales team of new leads",
        "icon": "UserPlus",
        "supportedDeliveryMethods": ["email", "sms", "slack"],
        "demoTemplate": {
            "subject": "New Lead: {{name}}",
            "message": "New lead from {{source}}: {{name}} ({{email}})",
        },
    },
    {
        "id": "appointment-booking",
        "name": "Appointment Booking",
        "category": "operations",
        "description": "Automated appointment confirmations",
        "icon": "Calendar",
        "supportedDeliveryMethods": ["email", "sms", "calendar"],
        "demoTemplate": {
            "subject": "Your Appointment Confirmation",
            "message": "Your appointment is confirmed for {{date}} at {{time}}",
        },
    },
    {
        "id": "customer-support",
        "name": "Support Ticket Response",
        "category": "support",
        "description": "Auto-respond to support tickets",
        "icon": "MessageCircle",
        "supportedDeliveryMethods": ["email", "slack", "webhook"],
        "demoTemplate": {
            "subject": "Re: Support Ticket #{{ticketId}}",
            "message": "Thank you for contacting support. We've received your request.",
        },
    },
    {
        "id": "order-confirmation",
        "name": "Order Confirmation",
        "category": "operations",
        "description": "Send order confirmations instantly",
        "icon": "ShoppingCart",
        "supportedDeliveryMethods": ["email", "sms"],
        "demoTemplate": {
            "subject": "Order Confirmation #{{orderId}}",
            "message": "Your order #{{orderId}} has been confirmed. Total: ${{amount}}",
        },
    },
    {
        "id": "event-registration",
        "name": "Event Registration",
        "category": "marketing",
        "description": "Automate event registrations",
        "icon": "Users",
        "supportedDeliveryMethods": ["email", "calendar", "sms"],
        "demoTemplate": {
            "subject": "You're Registered for {{eventName}}",
            "message": "Thanks for registering! Event details: {{date}} at {{location}}",
        },
    },
    {
        "id": "password-reset",
        "name": "Password Reset",
        "category": "support",
        "description": "Automated password reset emails",
        "icon": "Lock",
        "supportedDeliveryMethods": ["email", "sms"],
        "demoTemplate": {
            "subject": "Reset Your Password",
            "message": "Click here to reset your password: {{resetLink}}",
        },
    },
    {
        "id": "invoice-reminder",
        "name": "Invoice Reminder",
        "category": "operations",
        "description": "Automated invoice reminders",
        "icon": "DollarSign",
        "supportedDeliveryMethods": ["email", "sms"],
        "demoTemplate": {
            "subject": "Invoice #{{invoiceId}} Due Soon",
            "message": "Your invoice of ${{amount}} is due on {{dueDate}}",
        },
    },
    {
        "id": "welcome-sequence",
        "name": "Welcome Email Sequence",
        "category": "marketing",
        "description": "Onboard new users automatically",
        "icon": "Mail",
        "supportedDeliveryMethods": ["email", "email_sequence"],
        "demoTemplate": {
            "subject": "Welcome to {{companyName}}!",
            "message": "We're excited to have you! Here's how to get started...",
        },
    },
]
