from dataclasses import dataclass


@dataclass(frozen=True)
class ClientDetails:
    """予約者情報（表示用）"""

    name: str | None = None
    email: str | None = None
    phone: str | None = None

    @property
    def display_name(self) -> str | None:
        if self.name and self.name.strip():
            return self.name
        return None
