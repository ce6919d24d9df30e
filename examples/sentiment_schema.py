from typing_extensions import Annotated, Doc, Literal, TypedDict


class ResponseShape(TypedDict):
    sentiment: Annotated[
        Literal["positive", "negative", "neutral"],
        Doc("The sentiment of the text, with positive, negative, and neutral as the only options"),
    ]
    hasTheWordGoose: Annotated[bool, Doc('Whether the text contains the word "goose"')]
