"""Pydantic request/response models for the Registration API.

Wire names follow the mobile client contract (``regId``); Python attributes
stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field

from registration.device.directory import MAX_LIST_COUNT


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class RegIdParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reg_id: str = Field(
        ...,
        alias="regId",
        examples=["fcm-token-abc123"],
        description="Push-notification token issued to the device",
    )


class ListDevicesParams(BaseModel):
    count: int = Field(
        ...,
        ge=0,
        le=MAX_LIST_COUNT,
        examples=[20],
        description="Maximum number of devices to return",
    )


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class RegistrationRecordResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    reg_id: str = Field(..., alias="regId")


class CollectionResponse(BaseModel):
    items: list[RegistrationRecordResponse] = Field(default_factory=list)
