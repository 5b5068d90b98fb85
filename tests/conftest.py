"""全局测试配置：共享的客户端配置 fixture。"""

import pytest

from alipay_customs.models.schemas import ClientConfig

TEST_PARTNER = "2088101122136241"
TEST_KEY = "760bdzec6y9goq7ctyx96ezkz78287de"


@pytest.fixture
def config():
    return ClientConfig(
        partner=TEST_PARTNER,
        key=TEST_KEY,
        customs_place="HANGZHOU",
        merchant_customs_code="hanguo",
        merchant_customs_name="hanguo_name",
    )
