from fastapi import HTTPException, status


class MissingFieldException(HTTPException):
    def __init__(self, field: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": f"Missing required field: {field}"}
        )

class InvalidMobileException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Invalid mobile number"}
        )

class InvalidPanException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Invalid PAN number"}
        )

class InvalidManagerException(HTTPException):
    def __init__(self, message: str = "Invalid or inactive manager_id"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": message}
        )

class MissingLocatorException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Provide user_id or mob_num"}
        )

class MissingUpdatePayloadException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Missing user_ids or update_data"}
        )

class UserNotFoundException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "User not found"}
        )
