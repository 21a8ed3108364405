EMAIL_ONLY = {
    "message": "Contact me at john.doe@example.com for more info",
}

PHONE_ONLY = {
    "contact": "Call me at 555-123-4567",
}

RECOVERY_NOTES = {
    "notes": "I relapsed yesterday and watched pornography",
}

MULTI_PII = {
    "profile": "John Smith, email: john@example.com, phone: 555-123-4567, SSN: 123-45-6789",
}

CLEAN = {
    "message": "I am feeling better today and completed my focus session",
    "mood": 8,
    "completed": True,
}

ROUTINE = {
    "routine": "I usually relapse at home in my bedroom around 11:30 PM every night",
}

SSN_WITH_EXPLICIT = {
    "notes": "My SSN is 123-45-6789 and I watch porn daily",
}

NESTED = {
    "user": {
        "profile": {
            "contact": {
                "email": "user@example.com",
                "phone": "555-0123",
            },
        },
        "recovery": {
            "notes": ["I relapsed yesterday", "Feeling ashamed and guilty"],
            "progress": {
                "days": 30,
                "setbacks": ["pornography viewing", "masturbation"],
            },
        },
    },
}

EMPTY_PAYLOADS = [None, "", {}, []]

LONE_SSN = {
    "notes": "My SSN is 123-45-6789",
}

EMAIL_AND_PHONE = {
    "email": "jane@example.com",
    "phone": "555-123-4567",
}
