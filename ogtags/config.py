import typing


DEFAULT_USER_AGENT = 'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/132.0.0.0 Safari/537.36'


class FetchConfig:
    timeout: float = 4
    user_agent: str = DEFAULT_USER_AGENT
    headers: typing.Dict[str, str] = {}

    def __init__(self, *args, **kwargs):
        for k, v in kwargs.items():
            self.__setattr__(k, v)
