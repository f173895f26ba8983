"""Constants for LogEntry model field names"""


class LogFields:
    """Field name constants for LogEntry model"""
    NAME = "name"
    GAIT = "gait"
    AUTH = "auth"
    STATUS = "status"
    TIME = "time"

    REQUIRED = (NAME, TIME)
