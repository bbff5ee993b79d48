"""Alexa Skill response models and builder methods."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, PrivateAttr, model_serializer

from .directives import (
    AudioItem,
    AudioPlayerDirective,
    DelegateDirective,
    DialogDirective,
    Directive,
    DisplayDirective,
    DisplayImage,
    DisplayTemplate,
    DisplayText,
    DisplayTextContent,
    Stream,
    VideoAppDirective,
    VideoItem,
    VideoMetadata,
)
from .request import Intent

PROTOCOL_VERSION = "1.0"


class PlainTextOutputSpeech(BaseModel):
    """Speech output as plain text."""

    type: Literal["PlainText"] = "PlainText"
    text: str


class SsmlOutputSpeech(BaseModel):
    """Speech output as SSML markup."""

    type: Literal["SSML"] = "SSML"
    ssml: str


OutputSpeech = Annotated[
    PlainTextOutputSpeech | SsmlOutputSpeech,
    Field(discriminator="type"),
]


class CardImage(BaseModel):
    smallImageUrl: str | None = None
    largeImageUrl: str | None = None


class SimpleCard(BaseModel):
    """Card with a title and plain content."""

    type: Literal["Simple"] = "Simple"
    title: str
    content: str


class StandardCard(BaseModel):
    """Card with a title, text and an image."""

    type: Literal["Standard"] = "Standard"
    title: str
    text: str
    image: CardImage | None = None


class LinkAccountCard(BaseModel):
    """Card prompting the user to link their account in the Alexa app."""

    type: Literal["LinkAccount"] = "LinkAccount"


class AskForPermissionsConsentCard(BaseModel):
    """Card asking the user to grant the listed permissions."""

    type: Literal["AskForPermissionsConsent"] = "AskForPermissionsConsent"
    permissions: list[str]


Card = Annotated[
    SimpleCard | StandardCard | LinkAccountCard | AskForPermissionsConsentCard,
    Field(discriminator="type"),
]


class Reprompt(BaseModel):
    """Speech used when the user does not answer while the session stays open."""

    outputSpeech: OutputSpeech | None = None


class Response(BaseModel):
    """Alexa response body.

    Built incrementally by the request handler. Every setter replaces the
    previous value of its field; ``add_*`` methods append directives in the
    order the device should execute them. All builder methods return the
    response so calls can be chained.
    """

    outputSpeech: OutputSpeech | None = None
    card: Card | None = None
    reprompt: Reprompt | None = None
    directives: list[Directive] = Field(default_factory=list)
    shouldEndSession: bool | None = None

    _session_attributes: dict[str, Any] = PrivateAttr(default_factory=dict)

    @model_serializer(mode="wrap")
    def _omit_empty_directives(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        if not data.get("directives"):
            data.pop("directives", None)
        return data

    @property
    def session_attributes(self) -> dict[str, Any]:
        """Session attributes staged by handlers for the response envelope."""
        return self._session_attributes

    def set_session_attribute(self, key: str, value: Any) -> "Response":
        self._session_attributes[key] = value
        return self

    def set_should_end_session(self, should_end: bool | None) -> "Response":
        self.shouldEndSession = should_end
        return self

    # Speech

    def set_output_text(self, text: str) -> "Response":
        self.outputSpeech = PlainTextOutputSpeech(text=text)
        return self

    def set_output_ssml(self, ssml: str) -> "Response":
        self.outputSpeech = SsmlOutputSpeech(ssml=ssml)
        return self

    def set_reprompt_text(self, text: str) -> "Response":
        if self.reprompt is None:
            self.reprompt = Reprompt()
        self.reprompt.outputSpeech = PlainTextOutputSpeech(text=text)
        return self

    def set_reprompt_ssml(self, ssml: str) -> "Response":
        if self.reprompt is None:
            self.reprompt = Reprompt()
        self.reprompt.outputSpeech = SsmlOutputSpeech(ssml=ssml)
        return self

    # Cards

    def set_simple_card(self, title: str, content: str) -> "Response":
        self.card = SimpleCard(title=title, content=content)
        return self

    def set_standard_card(
        self,
        title: str,
        text: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> "Response":
        self.card = StandardCard(
            title=title,
            text=text,
            image=CardImage(smallImageUrl=small_image_url, largeImageUrl=large_image_url),
        )
        return self

    def set_link_account_card(self) -> "Response":
        self.card = LinkAccountCard()
        return self

    def set_ask_for_permissions_consent_card(self, permissions: list[str]) -> "Response":
        self.card = AskForPermissionsConsentCard(permissions=list(permissions))
        return self

    # Directives

    def add_audio_player(
        self,
        player_type: str,
        play_behavior: str,
        stream_token: str,
        url: str,
        offset_in_milliseconds: int = 0,
    ) -> "Response":
        """Append an AudioPlayer directive that plays a stream."""
        self.directives.append(
            AudioPlayerDirective(
                type=player_type,
                playBehavior=play_behavior,
                audioItem=AudioItem(
                    stream=Stream(
                        token=stream_token,
                        url=url,
                        offsetInMilliseconds=offset_in_milliseconds,
                    )
                ),
            )
        )
        return self

    def add_audio_player_stop(self) -> "Response":
        self.directives.append(AudioPlayerDirective(type="AudioPlayer.Stop"))
        return self

    def add_audio_player_clear_queue(self, clear_behavior: str = "CLEAR_ENQUEUED") -> "Response":
        self.directives.append(
            AudioPlayerDirective(type="AudioPlayer.ClearQueue", clearBehavior=clear_behavior)
        )
        return self

    def add_video_app(
        self,
        source: str,
        title: str | None = None,
        subtitle: str | None = None,
    ) -> "Response":
        metadata = None
        if title or subtitle:
            metadata = VideoMetadata(title=title, subtitle=subtitle)
        self.directives.append(
            VideoAppDirective(videoItem=VideoItem(source=source, metadata=metadata))
        )
        return self

    def add_dialog_directive(
        self,
        dialog_type: str,
        slot_to_elicit: str | None = None,
        slot_to_confirm: str | None = None,
        intent: Intent | None = None,
    ) -> "Response":
        """Append a Dialog.ElicitSlot, Dialog.ConfirmSlot or Dialog.ConfirmIntent directive."""
        self.directives.append(
            DialogDirective(
                type=dialog_type,
                slotToElicit=slot_to_elicit,
                slotToConfirm=slot_to_confirm,
                updatedIntent=intent,
            )
        )
        return self

    def add_delegate_directive(self, intent: Intent | None = None) -> "Response":
        self.directives.append(DelegateDirective(updatedIntent=intent))
        return self

    def add_display_directive(
        self,
        template_type: str,
        token: str,
        back_button: str = "VISIBLE",
        background_image: DisplayImage | None = None,
        title: str | None = None,
        image: DisplayImage | None = None,
        primary_text: str | None = None,
        secondary_text: str | None = None,
        tertiary_text: str | None = None,
    ) -> "Response":
        """
        Append a Display.RenderTemplate directive.

        Text content is only included when ``primary_text`` is given; secondary
        and tertiary lines are optional on top of it.
        """
        text_content = None
        if primary_text is not None:
            text_content = DisplayTextContent(
                primaryText=DisplayText(text=primary_text),
                secondaryText=DisplayText(text=secondary_text) if secondary_text is not None else None,
                tertiaryText=DisplayText(text=tertiary_text) if tertiary_text is not None else None,
            )

        self.directives.append(
            DisplayDirective(
                template=DisplayTemplate(
                    type=template_type,
                    token=token,
                    backButton=back_button,
                    backgroundImage=background_image,
                    title=title,
                    image=image,
                    textContent=text_content,
                )
            )
        )
        return self


class ResponseEnvelope(BaseModel):
    """Full Alexa response envelope."""

    version: str = PROTOCOL_VERSION
    sessionAttributes: dict[str, Any] | None = None
    response: Response

    def to_wire(self) -> dict[str, Any]:
        """Serialize for the platform, leaving out every unset optional field."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
