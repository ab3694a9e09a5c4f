from typing import List

from pydantic import BaseModel


class ApiErrors(BaseModel):
    """Error body: a list of human readable messages."""

    erros: List[str]
