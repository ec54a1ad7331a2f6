"""
响应日期字段转换，以及请求日期参数的序列化
"""
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union

from dateutil import parser as date_parser
from loguru import logger

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# 缺失的月 / 日按 1 号补齐，不能取当天日期
PARSE_DEFAULT = datetime(1970, 1, 1)

# 只有年、年月或年月日的 ISO 字符串按 UTC 零点处理
DATE_ONLY = re.compile(r"^\s*\d{4}(-\d{2}(-\d{2})?)?\s*$")


def parse_date(value: Any) -> Optional[datetime]:
    """
    将响应中的日期字段解析为 datetime

    字符串交给 dateutil 解析（ISO-8601 及交易所返回的其他格式），
    数字按毫秒时间戳处理。无法解析时返回 None，不抛出异常。
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return EPOCH + timedelta(milliseconds=value)
        except (OverflowError, ValueError):
            pass
    elif isinstance(value, str):
        try:
            parsed = date_parser.parse(value, default=PARSE_DEFAULT)
            if parsed.tzinfo is None and DATE_ONLY.match(value):
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed
        except (ValueError, OverflowError):
            pass

    logger.warning(f"Unparseable date value: {value!r}")
    return None


def normalize_dates(response: Dict, field: str, *collections: str) -> Dict:
    """
    转换响应中各记录列表的日期字段

    返回新的 dict，原响应不会被修改。响应中不存在的列表原样跳过，
    缺少该字段的记录也原样保留。

    Args:
        response: 原始响应
        field: 日期字段名（如 solddate, created, timestamp, month）
        collections: 记录列表的键名（如 buyorders, sellorders）

    Returns:
        日期字段已转换为 datetime 的新响应
    """
    result = dict(response)
    for key in collections:
        records = response.get(key)
        if not isinstance(records, list):
            continue
        result[key] = [
            {**record, field: parse_date(record[field])} if field in record else dict(record)
            for record in records
        ]
    return result


def to_iso_string(value: Union[date, datetime]) -> str:
    """序列化为 UTC ISO-8601（YYYY-MM-DDTHH:MM:SS.mmmZ），naive datetime 视为 UTC"""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def to_date_string(value: Union[date, datetime]) -> str:
    """序列化为日期（YYYY-MM-DD）"""
    return to_iso_string(value)[:10]


def optional_iso(value: Optional[Union[date, datetime]]) -> Optional[str]:
    return to_iso_string(value) if value is not None else None


def optional_date(value: Optional[Union[date, datetime]]) -> Optional[str]:
    return to_date_string(value) if value is not None else None
