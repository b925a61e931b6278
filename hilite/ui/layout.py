"""Rectangle geometry for overlays."""

from pydantic import BaseModel, ConfigDict, Field

from hilite.core.cells import saturating_sub


class Rect(BaseModel):
    """Screen rectangle in terminal cells."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(default=0, ge=0)
    y: int = Field(default=0, ge=0)
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)


class Margin(BaseModel):
    """Space added around dialog content on each side."""

    model_config = ConfigDict(frozen=True)

    horizontal: int = Field(default=0, ge=0)
    vertical: int = Field(default=0, ge=0)


def outer_rect(rect: Rect, margin: Margin) -> Rect:
    """Grow ``rect`` by ``margin`` on every side, stopping at the screen origin."""
    return Rect(
        x=saturating_sub(rect.x, margin.horizontal),
        y=saturating_sub(rect.y, margin.vertical),
        width=rect.width + margin.horizontal * 2,
        height=rect.height + margin.vertical * 2,
    )


def centered_area(base: Rect, width: int, height: int) -> Rect:
    """Rectangle of the requested size centred in ``base`` and clipped to it."""
    width = min(width, base.width)
    height = min(height, base.height)
    return Rect(
        x=base.x + (base.width - width) // 2,
        y=base.y + (base.height - height) // 2,
        width=width,
        height=height,
    )
