"""
CoinSpot API Client
===================
封装 CoinSpot API v2 的 HTTP 请求，包括签名生成和请求处理。
"""
import hmac
import hashlib
import time
import json
from typing import Optional, Any, Dict, Mapping, Sequence
import httpx
from loguru import logger


class CoinSpotError(Exception):
    """CoinSpot SDK 错误基类"""


class CoinSpotAuthError(CoinSpotError):
    """未配置 apiKey / secret 时调用私有 API"""

    def __init__(self, message: str = "apiKey and secret has not been setup."):
        super().__init__(message)


class CoinSpotAPIError(CoinSpotError):
    """CoinSpot 返回 status 为 error 的响应（仅由 ensure_ok 抛出）"""

    def __init__(self, status: str, message: str, data: Any = None):
        self.status = status
        self.message = message
        self.data = data
        super().__init__(f"[{status}] {message}")


def sign(secret: str, body: str) -> str:
    """
    生成 API 签名
    签名 = Hex(HMAC-SHA512(body, secret))

    Args:
        secret: API Secret
        body: 请求体（序列化后的 JSON 字符串）

    Returns:
        小写十六进制签名（128 个字符）
    """
    mac = hmac.new(
        secret.encode("utf-8"),
        body.encode("utf-8"),
        hashlib.sha512
    )
    return mac.hexdigest()


def ensure_ok(response: Dict) -> Dict:
    """status 为 error 时抛出 CoinSpotAPIError，否则原样返回响应"""
    if response.get("status") == "error":
        raise CoinSpotAPIError(
            status="error",
            message=response.get("message", "Unknown error"),
            data=response,
        )
    return response


class CoinSpotClient:
    """CoinSpot API 客户端"""

    # API 端点
    REST_BASE = "https://www.coinspot.com.au"
    PUBLIC_PREFIX = "/pubapi/v2"
    PRIVATE_PREFIX = "/api/v2"

    def __init__(
        self,
        api_key: Optional[str] = None,
        secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化 CoinSpot 客户端

        apiKey 和 secret 只在调用私有 API 时需要。

        Args:
            api_key: API Key（可选）
            secret: Secret Key（可选）
            base_url: 自定义基础 URL（可选）
            timeout: 请求超时（秒），默认不设超时
            transport: 自定义 httpx transport（可选，测试用）
        """
        self._api_key = api_key
        self._secret = secret

        if base_url:
            self.base_url = base_url.rstrip("/")
        else:
            self.base_url = self.REST_BASE

        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def has_credentials(self) -> bool:
        return self._api_key is not None and self._secret is not None

    @property
    def public_url(self) -> str:
        return f"{self.base_url}{self.PUBLIC_PREFIX}"

    @property
    def private_url(self) -> str:
        return f"{self.base_url}{self.PRIVATE_PREFIX}"

    async def __aenter__(self):
        # 重复进入时沿用已打开的连接
        if self._client is None:
            self._client = self._new_http_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            await self._client.aclose()
            self._client = None

    def _new_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    def _get_nonce(self) -> int:
        """获取 nonce（Unix 毫秒时间戳）"""
        return time.time_ns() // 1_000_000

    @staticmethod
    def _join_url(url: str, segments: Sequence[Optional[str]]) -> str:
        """拼接路径片段，跳过 None，相邻片段之间只保留一个斜杠"""
        parts = [url.rstrip("/")]
        for segment in segments:
            if segment is None:
                continue
            segment = str(segment).strip("/")
            if segment:
                parts.append(segment)
        return "/".join(parts)

    def _build_envelope(self, data: Optional[Mapping[str, Any]]) -> str:
        """
        构建签名请求体

        调用方字段按传入顺序在前，nonce 最后；值为 None 的字段不序列化。
        NaN / Infinity 直接抛出 ValueError，不发送请求。
        """
        envelope = {k: v for k, v in (data or {}).items() if v is not None and k != "nonce"}
        envelope["nonce"] = self._get_nonce()
        return json.dumps(envelope, separators=(",", ":"), ensure_ascii=False, allow_nan=False)

    def _get_headers(self, signature: str) -> Dict[str, str]:
        """构建请求头"""
        return {
            "Content-Type": "application/json",
            "key": self._api_key,
            "sign": signature,
        }

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(method, url, **kwargs)
        async with self._new_http_client() as client:
            return await client.request(method, url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs) -> Dict:
        logger.debug(f"CoinSpot {method} {url}")
        try:
            response = await self._send(method, url, **kwargs)
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"HTTP Error: {e}")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"JSON Decode Error: {e}")
            raise

    async def fetch_public(
        self,
        url: str,
        segments: Sequence[Optional[str]] = (),
    ) -> Dict:
        """
        请求公共 API（无需认证）

        Args:
            url: 完整的 API 端点 URL
            segments: 追加到 URL 的路径片段，None 会被跳过

        Returns:
            API 响应的 JSON 数据
        """
        return await self._request("GET", self._join_url(url, segments))

    async def fetch_private(
        self,
        url: str,
        data: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> Dict:
        """
        请求私有 API

        Args:
            url: 完整的 API 端点 URL
            data: 请求体参数（参与签名）
            params: 查询参数（不参与签名）

        Returns:
            API 响应的 JSON 数据，不检查 status 字段
        """
        if not self.has_credentials:
            raise CoinSpotAuthError()

        body = self._build_envelope(data)
        headers = self._get_headers(sign(self._secret, body))

        request_url = httpx.URL(url)
        for key, value in (params or {}).items():
            request_url = request_url.copy_set_param(key, value)

        return await self._request("POST", str(request_url), content=body, headers=headers)

    async def get(self, endpoint: str, *segments: Optional[str]) -> Dict:
        """GET 公共端点（如 /latest）"""
        return await self.fetch_public(f"{self.public_url}{endpoint}", segments)

    async def post(
        self,
        endpoint: str,
        data: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> Dict:
        """POST 私有端点（如 /my/buy）"""
        return await self.fetch_private(f"{self.private_url}{endpoint}", data, params)
