from dataclasses import dataclass


@dataclass(frozen=True)
class GameOption:
    value: str                 # stable id compared during resolution
    label: str                 # shown in the select menu
    description: str = ""      # select menu subtitle

    def to_select_option(self) -> dict[str, str]:
        return {"label": self.label, "value": self.value, "description": self.description}
