from pydantic import BaseModel, ConfigDict


class RequestBody(BaseModel):
    """Incoming JSON body; numeric values for string fields are taken as text."""

    model_config = ConfigDict(coerce_numbers_to_str=True)
