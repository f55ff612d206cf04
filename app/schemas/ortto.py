from pydantic import BaseModel


class OrttoPerson(BaseModel):
    person_id: str
    fields: dict[str, str]


class OrttoMergeRequest(BaseModel):
    merge_by: str = "person_id"
    people: list[OrttoPerson]


class MergeResult(BaseModel):
    success: bool
    skipped: bool = False
    status_code: int | None = None
    body: str | None = None
    error: str | None = None
