from dataclasses import dataclass


@dataclass(frozen=True)
class Light:
    light_id: int
    model_id: str
    is_on: bool
    name: str = ""


@dataclass(frozen=True)
class DiscoveryResult:
    address: str
    username: str

    def as_config_section(self) -> str:
        """Render the ``[Hue]`` section to paste into the configuration file."""
        return f"[Hue]\nAddress = {self.address}\nUser = {self.username}\n"
