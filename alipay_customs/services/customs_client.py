"""
支付宝海关报关 API 客户端：使用 MD5 签名调用跨境报关接口。

主要功能：
- alipay.acquire.customs 推送报关信息
  (https://global.alipay.com/docs/ac/global/acquire_customs)
- alipay.overseas.acquire.customs.query 查询报关状态
  (https://global.alipay.com/docs/ac/global/customs_query)

返回原始 HTTP 响应，不解析响应内容；网络异常直接抛给调用方。
"""

import logging

import httpx

from alipay_customs.models.schemas import ClientConfig
from alipay_customs.services.sign import generate_sign, verify_sign

logger = logging.getLogger(__name__)

ACQUIRE_CUSTOMS_SERVICE = "alipay.acquire.customs"
CUSTOMS_QUERY_SERVICE = "alipay.overseas.acquire.customs.query"
INPUT_CHARSET = "UTF-8"


class CustomsClient:
    """支付宝海关报关 API 客户端。"""

    def __init__(self, config: ClientConfig, timeout: float = 10.0, headers: dict | None = None):
        """
        Args:
            config: 商户配置（partner、key、海关信息等）。
            timeout: HTTP 请求超时秒数。
            headers: 附加请求头。
        """
        self.config = config
        self.timeout = timeout
        self.headers = dict(headers or {})

    @classmethod
    def from_options(cls, **options) -> "CustomsClient":
        """按字段名直接构造客户端，未知字段抛出 ConfigError。"""
        return cls(ClientConfig.from_dict(options))

    @property
    def base_uri(self) -> str:
        return self.config.base_uri

    def _common_params(self) -> dict:
        """构建公共请求参数。"""
        return {
            "_input_charset": INPUT_CHARSET,
            "sign_type": self.config.sign_type.value,
        }

    def _merchant_params(self) -> dict:
        return {
            "partner": self.config.partner,
            "customs_place": self.config.customs_place,
            "merchant_customs_code": self.config.merchant_customs_code,
            "merchant_customs_name": self.config.merchant_customs_name,
        }

    def _sign_body(self, body: dict) -> dict:
        """对请求体签名，返回包含 sign 的新字典。"""
        signed = dict(body)
        signed["sign"] = generate_sign(body, self.config.key, self.config.sign_type)
        return signed

    def build_acquire_customs_body(self, params: dict) -> dict:
        """构建已签名的报关请求参数，调用方参数覆盖默认值。"""
        body = {"service": ACQUIRE_CUSTOMS_SERVICE}
        body.update(self._merchant_params())
        body.update(self._common_params())
        body.update(params)
        return self._sign_body(body)

    def build_customs_query_body(self, params: dict) -> dict:
        """构建已签名的报关查询请求参数，调用方参数覆盖默认值。"""
        body = {
            "service": CUSTOMS_QUERY_SERVICE,
            "partner": self.config.partner,
        }
        body.update(self._common_params())
        body.update(params)
        return self._sign_body(body)

    def acquire_customs(self, params: dict) -> httpx.Response:
        """
        推送报关信息。

        Args:
            params: 业务参数，如 out_request_no、trade_no、amount 等。

        Returns:
            原始 httpx.Response。

        Raises:
            httpx.HTTPError: 网络请求失败，原样抛出。
        """
        return self._invoke_remote(self.build_acquire_customs_body(params))

    def customs_query(self, params: dict) -> httpx.Response:
        """
        查询报关状态。

        Args:
            params: 业务参数，如 out_request_nos。

        Returns:
            原始 httpx.Response。
        """
        return self._invoke_remote(self.build_customs_query_body(params))

    def verify_sign(self, params: dict) -> bool:
        """使用商户密钥验证参数中的 sign 字段（如支付宝异步通知）。"""
        sign = params.get("sign")
        if not sign:
            return False
        return verify_sign(sign, params, self.config.key, self.config.sign_type)

    def _invoke_remote(self, body: dict) -> httpx.Response:
        url = self.base_uri
        logger.info("调用支付宝报关接口: service=%s url=%s", body.get("service"), url)
        with httpx.Client(timeout=self.timeout) as client:
            response = client.post(url, headers=self.headers, data=body)
        logger.debug("支付宝报关接口响应: service=%s status=%s", body.get("service"), response.status_code)
        return response
