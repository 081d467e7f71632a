from pydantic import BaseModel, ConfigDict


class TagBase(BaseModel):
    name: str


class Tag(TagBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


class TagUsage(Tag):
    count: int = 0
