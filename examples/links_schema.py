from typing_extensions import Annotated, Doc, TypedDict


class LinkInformation(TypedDict):
    """An extracted http or https link from the supplied input. If text does not have a link, it should be ignored."""

    url: Annotated[
        str,
        Doc("The URL of the link. Ignore lines that do not have a link. Links must start with http:// or https://"),
    ]
    description: Annotated[
        str,
        Doc("The description of the link given in the text. If no description is given, try to infer one from the URL"),
    ]
    category: Annotated[str, Doc("The general category of the description, given as a single word")]


class ResponseShape(TypedDict):
    links: list[LinkInformation]
