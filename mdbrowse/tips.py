def browser_tips() -> str:
    """Format tips line for the browsing page."""
    return "Tips: Enter=open, Left/Esc=up, Home/End=jump, q=quit"


def viewer_tips(status: str = "") -> str:
    """Format tips line for the viewing page."""
    parts = ["Tips: Up/Down=scroll", "PgUp/PgDn=page", "Home/End=jump", "Esc=back", "q=quit"]
    return ", ".join(parts) + (f" | {status}" if status else "")
