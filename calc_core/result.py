"""calc_core/result.py"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Success:
    """计算成功：携带结果值"""
    value: Any

    @property
    def is_success(self):
        return True

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Failure:
    """计算失败：携带可读的错误信息"""
    message: str

    @property
    def is_success(self):
        return False

    def __str__(self):
        return self.message
