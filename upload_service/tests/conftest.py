import httpx
import pytest
from faker import Faker
from upload_service.schemas import UploadServiceConfig
from upload_service.tests.fake_upload_api import FakeUploadApi
from upload_service.uploader import Uploader

fake = Faker()


@pytest.fixture
def upload_config() -> UploadServiceConfig:
    return UploadServiceConfig(
        public_key=fake.sha1(),
        headers={"User-Agent": fake.user_agent()},
    )


@pytest.fixture(name="upload_api")
def fixture_upload_api() -> FakeUploadApi:
    return FakeUploadApi()


@pytest.fixture(name="http_client")
def fixture_http_client(upload_api: FakeUploadApi) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(upload_api.handle))


@pytest.fixture(name="uploader")
def fixture_uploader(
    upload_config: UploadServiceConfig, http_client: httpx.Client
) -> Uploader:
    return Uploader(upload_config, client=http_client)
