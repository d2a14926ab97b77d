"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

PIN_LENGTH = 4
CONTACT_INFO_MIN_LENGTH = 8
CONTACT_INFO_MAX_LENGTH = 10
