"""Class and job progression models."""

from pydantic import Field

from xivapi.models.base import U8, U32, XIVModel


class UnlockedState(XIVModel):
    """Whether a class has been unlocked and, if so, as which class/job."""

    id: U8 | None = Field(None, alias="ID", description="Unlocked class/job ID, null if locked")
    name: str = Field(..., description="Name of the unlocked class/job")


class Class(XIVModel):
    """Progression of one class or job."""

    class_id: U8 = Field(..., alias="ClassID", description="ID of the base class")
    job_id: U8 | None = Field(
        None, alias="JobID", description="ID of the job, once the class has been upgraded"
    )
    level: U8 = Field(..., description="Current level")
    exp_level: U32 = Field(..., description="Experience earned in the current level")
    exp_level_max: U32 = Field(..., description="Experience needed for the current level")
    exp_level_togo: U32 = Field(..., description="Experience left until the next level")
    is_specialised: bool = Field(..., description="Whether the crafter is specialised")
    name: str = Field(..., description="Class or job name")
    unlocked_state: UnlockedState


class ClassBozjan(XIVModel):
    """Resistance rank progression in Bozjan content."""

    name: str
    level: U8 | None = Field(None, description="Resistance rank, null if never engaged")
    mettle: U32 | None = Field(None, description="Mettle towards the next rank")


class ClassElemental(XIVModel):
    """Elemental level progression in Eureka content."""

    name: str
    level: U8 | None = Field(None, description="Elemental level, null if never engaged")
    exp_level: U32 | None = None
    exp_level_max: U32 | None = None
    exp_level_togo: U32 | None = None
