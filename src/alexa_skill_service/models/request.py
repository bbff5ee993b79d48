"""Alexa Skill request envelope models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ER_SUCCESS_MATCH = "ER_SUCCESS_MATCH"


class InboundModel(BaseModel):
    """Base for models decoded from the Alexa request payload.

    Inbound data is read-only once received, and unknown keys are ignored so
    new platform fields never break decoding.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class SlotValue(InboundModel):
    """Canonical slot value from entity resolution."""

    name: str = ""
    id: str | None = None


class ResolutionValue(InboundModel):
    """Wrapper around one resolved slot value."""

    value: SlotValue


class ResolutionStatus(InboundModel):
    """Entity resolution status, e.g. ER_SUCCESS_MATCH or ER_SUCCESS_NO_MATCH."""

    code: str


class Authority(InboundModel):
    """Resolution results from a single authority (slot type)."""

    authority: str = ""
    status: ResolutionStatus | None = None
    values: list[ResolutionValue] = []


class Resolution(InboundModel):
    """Entity resolution data attached to a slot."""

    resolutionsPerAuthority: list[Authority] = []


class IntentSlot(InboundModel):
    """Alexa slot value."""

    name: str
    value: str | None = None
    confirmationStatus: str | None = None
    id: str | None = None
    resolutions: Resolution | None = None

    def resolved_value(self) -> str | None:
        """Return the first canonical value matched by entity resolution."""
        if self.resolutions is None:
            return None
        for authority in self.resolutions.resolutionsPerAuthority:
            if authority.status is None or authority.status.code != ER_SUCCESS_MATCH:
                continue
            if authority.values:
                return authority.values[0].value.name
        return None


class Intent(InboundModel):
    """Alexa intent with slots."""

    name: str
    confirmationStatus: str | None = None
    slots: dict[str, IntentSlot] = {}

    def slot_value(self, slot_name: str) -> str | None:
        """Return the raw spoken value of a slot, or None if it was not filled."""
        slot = self.slots.get(slot_name)
        return slot.value if slot else None


class SessionEndedError(InboundModel):
    """Error details sent with a SessionEndedRequest."""

    type: str = ""
    message: str = ""


class Request(InboundModel):
    """Alexa request payload."""

    type: str
    requestId: str = ""
    timestamp: str = ""
    locale: str = "en-US"
    dialogState: str | None = None
    intent: Intent | None = None
    reason: str | None = None
    error: SessionEndedError | None = None


class SessionUser(InboundModel):
    userId: str = ""
    accessToken: str | None = None


class SessionApplication(InboundModel):
    applicationId: str = ""


class Session(InboundModel):
    """Alexa session information."""

    new: bool = False
    sessionId: str = ""
    attributes: dict[str, Any] = {}
    user: SessionUser = Field(default_factory=SessionUser)
    application: SessionApplication = Field(default_factory=SessionApplication)


class AudioPlayerState(InboundModel):
    playerActivity: str | None = None
    token: str | None = None
    offsetInMilliseconds: int | None = None


class DisplayState(InboundModel):
    token: str | None = None


class DisplayInterface(InboundModel):
    templateVersion: str | None = None
    markupVersion: str | None = None


class SupportedInterfaces(InboundModel):
    audio_player: dict[str, Any] | None = Field(None, alias="AudioPlayer")
    display: DisplayInterface | None = Field(None, alias="Display")
    video_app: dict[str, Any] | None = Field(None, alias="VideoApp")


class Device(InboundModel):
    deviceId: str = ""
    supportedInterfaces: SupportedInterfaces = Field(default_factory=SupportedInterfaces)


class SystemState(InboundModel):
    """Device and skill identity snapshot from the System context object."""

    application: SessionApplication = Field(default_factory=SessionApplication)
    user: SessionUser = Field(default_factory=SessionUser)
    device: Device = Field(default_factory=Device)
    apiEndpoint: str | None = None
    apiAccessToken: str | None = None


class Context(InboundModel):
    """Device capability snapshot passed through to the handler."""

    audio_player: AudioPlayerState = Field(default_factory=AudioPlayerState, alias="AudioPlayer")
    display: DisplayState = Field(default_factory=DisplayState, alias="Display")
    system: SystemState = Field(default_factory=SystemState, alias="System")


class RequestEnvelope(InboundModel):
    """Full Alexa request envelope."""

    version: str = "1.0"
    session: Session = Field(default_factory=Session)
    request: Request
    context: Context = Field(default_factory=Context)
