class JalaliError(Exception):
    """Base error."""

class InvalidCalendarYear(JalaliError, ValueError):
    """Raised when a Jalali year lies outside the break-point table."""

    def __init__(self, year: int):
        super().__init__(f"Invalid Jalali year {year}")
        self.year = year

class InvalidDate(JalaliError, ValueError):
    """Raised when a Jalali date is malformed or not a real calendar day."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value
