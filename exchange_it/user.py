"""User value object"""

from dataclasses import dataclass

from .uid import as_text


@dataclass(frozen=True)
class User:
    """
    A person's name pair, used as input to identifier derivation.
    Both parts are always stored as text.
    """
    name: str
    surname: str
    
    def __post_init__(self):
        object.__setattr__(self, 'name', as_text(self.name))
        object.__setattr__(self, 'surname', as_text(self.surname))
    
    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}".strip()
