from urllib.parse import quote

from league.config import get_settings


def get_flag_url(team_name: str | None) -> str | None:
    """Flag image URL for a national team, keyed by its name."""
    if not team_name:
        return None
    base_url = get_settings().flag_base_url.rstrip("/")
    return f"{base_url}/{quote(team_name)}.png"
