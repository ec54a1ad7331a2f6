"""
配置文件
支持从环境变量读取配置
"""
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv


class CoinSpotConfig:
    """CoinSpot 配置类"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        初始化配置

        Args:
            api_key: API Key（如果为 None，则从环境变量读取）
            secret: Secret Key（如果为 None，则从环境变量读取）
            base_url: 自定义基础 URL（可选）
            timeout: 请求超时秒数（如果为 None，则从环境变量读取，未设置则不超时）
        """
        # 只在使用配置时读取当前目录的 .env，已存在的环境变量不会被覆盖
        load_dotenv(find_dotenv(usecwd=True))

        # 空字符串视为未配置，只能调用公共 API
        self.api_key = api_key or os.getenv("COINSPOT_API_KEY") or None
        self.secret = secret or os.getenv("COINSPOT_SECRET") or None
        self.base_url = base_url or os.getenv("COINSPOT_BASE_URL") or None

        if timeout is not None:
            self.timeout = timeout
        else:
            timeout_str = os.getenv("COINSPOT_TIMEOUT", "").strip()
            self.timeout = float(timeout_str) if timeout_str else None

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.secret)
