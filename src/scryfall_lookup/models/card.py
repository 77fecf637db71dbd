from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple, Union
from pydantic import BaseModel, ConfigDict, model_validator


class ImageUris(BaseModel):
    """Image URIs Scryfall publishes for a card or card face"""
    model_config = ConfigDict(frozen=True)

    small: Optional[str] = None
    normal: Optional[str] = None
    large: Optional[str] = None
    png: Optional[str] = None
    art_crop: Optional[str] = None
    border_crop: Optional[str] = None

    def get(self, size: str) -> Optional[str]:
        """Return the URI for a size key such as 'normal' or 'art_crop'"""
        if size not in type(self).model_fields:
            raise KeyError(size)
        return getattr(self, size)


class CardFace(BaseModel):
    """One printed side of a multi-faced card"""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    type_line: Optional[str] = None
    oracle_text: Optional[str] = None
    mana_cost: Optional[str] = None
    image_uris: Optional[ImageUris] = None


@dataclass(frozen=True)
class SingleFaced:
    """Artwork printed once on the card itself"""
    image_uris: ImageUris

    @property
    def primary_image_uris(self) -> ImageUris:
        return self.image_uris

    def image_uri(self, size: str = "normal") -> Optional[str]:
        return self.image_uris.get(size)


@dataclass(frozen=True)
class MultiFaced:
    """Artwork carried per face; the first face always has images"""
    faces: Tuple[CardFace, ...]

    def __post_init__(self):
        if not self.faces or self.faces[0].image_uris is None:
            raise ValueError("MultiFaced needs a first face with image_uris")

    @property
    def primary_image_uris(self) -> ImageUris:
        return self.faces[0].image_uris

    def image_uri(self, size: str = "normal") -> Optional[str]:
        return self.primary_image_uris.get(size)


Artwork = Union[SingleFaced, MultiFaced]


class Card(BaseModel):
    """Represents a Magic: The Gathering card from Scryfall API"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type_line: str
    oracle_text: Optional[str] = None
    image_uris: Optional[ImageUris] = None
    card_faces: Optional[Tuple[CardFace, ...]] = None
    scryfall_uri: str
    layout: Optional[str] = None
    rarity: Optional[str] = None
    set_name: Optional[str] = None
    mana_cost: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _type_line_from_faces(cls, data: Any) -> Any:
        """Reversible cards only carry type lines on their faces"""
        if not isinstance(data, dict) or data.get("type_line") is not None:
            return data
        faces = data.get("card_faces")
        if not isinstance(faces, (list, tuple)):
            return data
        face_lines = [face.get("type_line") for face in faces if isinstance(face, dict) and face.get("type_line")]
        if face_lines:
            data = dict(data, type_line=" // ".join(face_lines))
        return data

    @property
    def artwork(self) -> Optional[Artwork]:
        """Displayable artwork, or None when neither the card nor its first face has images"""
        if self.image_uris is not None:
            return SingleFaced(self.image_uris)
        if self.card_faces and self.card_faces[0].image_uris is not None:
            return MultiFaced(self.card_faces)
        return None

    @property
    def has_artwork(self) -> bool:
        return self.artwork is not None

    @classmethod
    def from_scryfall(cls, data: Dict[str, Any]) -> "Card":
        """Create Card from Scryfall API response"""
        return cls.model_validate(data)
