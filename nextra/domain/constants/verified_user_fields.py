"""Constants for VerifiedUser model field names"""


class VerifiedUserFields:
    """Field name constants for VerifiedUser model"""
    NAME = "name"
    ROLE = "role"
    PHOTO = "photo"

    REQUIRED = (NAME, ROLE, PHOTO)
