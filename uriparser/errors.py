# uriparser/errors.py

__all__ = ["UriParserError", "InvalidArgument", "EmptyInput", "MalformedUrl"]


class UriParserError(Exception):
    pass


class InvalidArgument(UriParserError, TypeError):
    def __init__(self, msg='First argument has to be string'):
        super().__init__(msg)


class EmptyInput(UriParserError, ValueError):
    def __init__(self, msg="String mustn't be empty"):
        super().__init__(msg)


class MalformedUrl(UriParserError, ValueError):
    def __init__(self, url, msg='Bad string given'):
        super().__init__(msg)
        self.url = url
