"""Alexa response directive models.

Each directive variant carries its own wire ``type`` values, which double as
the discriminator when a response is decoded again.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from .request import Intent


class Stream(BaseModel):
    """Audio stream to play."""

    token: str
    url: str
    offsetInMilliseconds: int = 0
    expectedPreviousToken: str | None = None


class AudioItem(BaseModel):
    stream: Stream


class AudioPlayerDirective(BaseModel):
    """Starts, stops or clears audio playback on the device."""

    type: Literal["AudioPlayer.Play", "AudioPlayer.Stop", "AudioPlayer.ClearQueue"]
    playBehavior: str | None = None
    audioItem: AudioItem | None = None
    clearBehavior: str | None = None


class VideoMetadata(BaseModel):
    title: str | None = None
    subtitle: str | None = None


class VideoItem(BaseModel):
    source: str
    metadata: VideoMetadata | None = None


class VideoAppDirective(BaseModel):
    """Launches video playback on devices with a screen."""

    type: Literal["VideoApp.Launch"] = "VideoApp.Launch"
    videoItem: VideoItem


class DialogDirective(BaseModel):
    """Asks Alexa to elicit or confirm a slot, or confirm the whole intent."""

    type: Literal["Dialog.ElicitSlot", "Dialog.ConfirmSlot", "Dialog.ConfirmIntent"]
    slotToElicit: str | None = None
    slotToConfirm: str | None = None
    updatedIntent: Intent | None = None


class DelegateDirective(BaseModel):
    """Hands the next dialog turn back to Alexa."""

    type: Literal["Dialog.Delegate"] = "Dialog.Delegate"
    updatedIntent: Intent | None = None


class DisplaySource(BaseModel):
    url: str
    size: str | None = None
    widthPixels: int | None = None
    heightPixels: int | None = None


class DisplayImage(BaseModel):
    """Image shown in a display template."""

    contentDescription: str = ""
    sources: list[DisplaySource] = []

    @classmethod
    def single(
        cls,
        content_description: str,
        url: str,
        size: str | None = None,
        width_pixels: int | None = None,
        height_pixels: int | None = None,
    ) -> "DisplayImage":
        """Build an image backed by a single source."""
        return cls(
            contentDescription=content_description,
            sources=[
                DisplaySource(
                    url=url,
                    size=size,
                    widthPixels=width_pixels,
                    heightPixels=height_pixels,
                )
            ],
        )


class DisplayText(BaseModel):
    text: str
    type: Literal["PlainText", "RichText"] = "PlainText"


class DisplayTextContent(BaseModel):
    primaryText: DisplayText
    secondaryText: DisplayText | None = None
    tertiaryText: DisplayText | None = None


class DisplayTemplate(BaseModel):
    """Body template rendered by Display.RenderTemplate."""

    type: str
    token: str
    backButton: Literal["HIDDEN", "VISIBLE"] = "VISIBLE"
    backgroundImage: DisplayImage | None = None
    title: str | None = None
    image: DisplayImage | None = None
    textContent: DisplayTextContent | None = None


class DisplayDirective(BaseModel):
    """Renders a display template on devices with a screen."""

    type: Literal["Display.RenderTemplate"] = "Display.RenderTemplate"
    template: DisplayTemplate


Directive = Annotated[
    AudioPlayerDirective
    | VideoAppDirective
    | DialogDirective
    | DelegateDirective
    | DisplayDirective,
    Field(discriminator="type"),
]
