from config.schema import SessionConfig


def default_session_config() -> SessionConfig:
    """Standardwerte: Prompt "> ", Banner an, Farbe an, Log-Level WARNING."""
    return SessionConfig(
        prompt="> ",
        show_banner=True,
        color=True,
        log_level="WARNING",
    )
