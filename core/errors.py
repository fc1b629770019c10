"""Errors raised while preparing the video history store"""


class SchemaError(Exception):
    """Base error for schema setup failures"""
    def __init__(self, message: str, code: str = "SCHEMA_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class SchemaInitError(SchemaError):
    """The storage layer rejected the schema DDL or could not be opened"""
    def __init__(self, message: str, code: str = "SCHEMA_INIT_FAILED"):
        super().__init__(message, code)


class ForeignKeyEnforcementError(SchemaError):
    """Referential integrity checking is not active on the connection"""
    def __init__(self, message: str, code: str = "FOREIGN_KEYS_DISABLED"):
        super().__init__(message, code)
