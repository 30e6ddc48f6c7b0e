from typing import Literal

UTF8: Literal["UTF-8"] = "UTF-8"
