"""
Shared pattern source-of-truth for PII and behavioural-disclosure detection.

Matchers run in PII_ORDER first, then the lexicon categories, then
DISCLOSURE_ORDER. The order is part of the output contract.
"""
import re

_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"

PII_PATTERNS = {
    "email": re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"),
    # North-American grouping, area code required: 555-123-4567, (555) 123-4567, +1 555.123.4567
    "phone": re.compile(
        r"(?<![\d-])(?:\+?1[-.\s]?)?(?:\(\d{3}\)\s?|\d{3}[-.\s])\d{3}[-.\s]\d{4}(?![\d-])"
    ),
    "ssn": re.compile(r"\b\d{3}-\d{2}-\d{4}\b"),
    # Heuristic: two adjacent capitalised words ("John Smith")
    "name": re.compile(r"\b[A-Z][a-z]+ [A-Z][a-z]+\b"),
    "creditCard": re.compile(r"\b(?:\d{4}[-\s]?){3}\d{4}\b"),
    # MM/DD/YYYY, 1900-2099
    "dateOfBirth": re.compile(r"\b(?:0[1-9]|1[0-2])/(?:0[1-9]|[12]\d|3[01])/(?:19|20)\d{2}\b"),
    "ipAddress": re.compile(rf"(?<![\d.]){_OCTET}(?:\.{_OCTET}){{3}}(?![\d.])"),
    # House number, one to three capitalised words, street suffix
    "address": re.compile(
        r"\b\d{1,6}\s+(?:[A-Z][a-z]+\s+){1,3}"
        r"(?:Street|St|Avenue|Ave|Road|Rd|Boulevard|Blvd|Lane|Ln|Drive|Dr|Way|Court|Ct|Place|Pl)\b"
    ),
    "driverLicense": re.compile(r"\b[A-Z]{1,2}\d{6,8}\b"),
    "macAddress": re.compile(r"\b(?:[0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}\b"),
    "url": re.compile(r"\bhttps?://[-A-Za-z0-9@:%._+~#=]{1,256}\.[A-Za-z0-9()]{1,6}\b[-A-Za-z0-9()@:%_+.~#?&/=]*"),
}

PII_ORDER = [
    "email", "phone", "ssn", "name",
    "creditCard", "dateOfBirth", "ipAddress", "address",
    "driverLicense", "macAddress", "url",
]

DISCLOSURE_PATTERNS = {
    "timePatterns": re.compile(
        r"\b(?:[01]?\d|2[0-3]):[0-5]\d(?:\s*[AaPp][Mm])?\b"
        r"|\b(?:every|each|most|at|late at|around)\s+(?:night|morning|evening|afternoon|weekend|midnight)s?\b"
        r"|\b(?:midnight|bedtime)\b",
        re.IGNORECASE,
    ),
    "routinePatterns": re.compile(
        r"\b(?:at|from)\s+(?:home|work|school|the office|the gym)\b"
        r"|\bin\s+(?:my|the)\s+(?:bedroom|bathroom|living room|room|car|office|bed)\b"
        r"|\b(?:usually|typically|routinely|habitually)\b"
        r"|\b(?:when|after|before)\s+I\s+(?:wake up|go to bed|shower|eat|work|commute|get home)\b",
        re.IGNORECASE,
    ),
}

DISCLOSURE_ORDER = ["timePatterns", "routinePatterns"]
