from sqlmodel import Field, SQLModel


class SecretTable(SQLModel, table=True):
    """
    Encoded credential records keyed by the caller supplied credential key.
    """

    key: str = Field(primary_key=True)
    value: str = Field(nullable=False)
