"""Inputs and outputs of the generation adapters."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class JobDetails(BaseModel):
    """The parts of a listing the model sees when writing for a specific job."""

    title: str = ""
    company: str = ""
    description: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.title and self.company and self.description)


class ResumeKeywords(BaseModel):
    """Search form values suggested from a resume."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    job_title_keywords: str = ""
    skills: str = ""
    location: str = ""
