"""Error codes and user-facing messages.

Each error in the catalog has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: The string returned to callers in the ``error`` field

Nothing is retried; every failure is reported once.
"""

ERROR_CATALOG: dict[str, dict] = {
    "TRANSCRIBE_001": {
        "code": "TRANSCRIBE_001",
        "message": "Upstream transcription request failed",
        "user_message": "Errore durante la trascrizione",
    },
    "AUDIO_001": {
        "code": "AUDIO_001",
        "message": "Audio payload is missing or empty",
        "user_message": "Errore durante la trascrizione",
    },
    "AUDIO_002": {
        "code": "AUDIO_002",
        "message": "Audio payload exceeds maximum size",
        "user_message": "Errore durante la trascrizione",
    },
    "CAPTURE_001": {
        "code": "CAPTURE_001",
        "message": "Speech capture source failed",
        "user_message": "Errore nel riconoscimento vocale",
    },
    "EXPORT_001": {
        "code": "EXPORT_001",
        "message": "Export destination unavailable or write failed",
        "user_message": "Errore durante il salvataggio",
    },
    "SNAPSHOT_001": {
        "code": "SNAPSHOT_001",
        "message": "Snapshot store read or write failed",
        "user_message": "Salvataggio automatico non riuscito",
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request failed validation",
        "user_message": "Dati della richiesta non validi",
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "Errore interno del server",
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details; a generic entry for unknown codes
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": ERROR_CATALOG["SYS_001"]["user_message"],
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str) -> str:
    """Get the caller-facing message for an error code."""
    return get_error(error_code)["user_message"]
