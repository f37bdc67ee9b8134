WEEKDAYS = ["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"]

DAYS_PER_WEEK = 7
GRID_WEEKS = 6
MIN_GRID_WEEKS = 5
GRID_CELLS = DAYS_PER_WEEK * GRID_WEEKS

DEFAULT_EVENT_LABEL = "Event"
DEFAULT_LOCALE = "en-US"
DEFAULT_TIMEZONE = "UTC"
DEFAULT_PROVIDER = "Google"

MONTH_NAMES = {
    "en-US": [
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
    ],
    "pt-BR": [
        "janeiro",
        "fevereiro",
        "março",
        "abril",
        "maio",
        "junho",
        "julho",
        "agosto",
        "setembro",
        "outubro",
        "novembro",
        "dezembro",
    ],
}

# Hour cycle per locale; both render a 2-digit hour.
HOUR_CYCLES = {
    "en-US": 12,
    "pt-BR": 24,
}

MONTH_LABEL_FORMATS = {
    "en-US": "{month} {year}",
    "pt-BR": "{month} de {year}",
}

CALENDAR_SLICE = "calendar"
