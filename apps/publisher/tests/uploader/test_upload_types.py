from publisher.uploader.types import TransferInterruptedError, UploadOutcome, UploadResult


class TestUploadResult:
    def test_to_dict(self):
        result = UploadResult(
            url="https://x/u1",
            artifact_name="app.apk",
            status_code=400,
            outcome=UploadOutcome.CLIENT_ERROR,
            body="bad request",
        )

        assert result.to_dict() == {
            "url": "https://x/u1",
            "artifact_name": "app.apk",
            "status_code": 400,
            "outcome": "client_error",
            "body": "bad request",
        }
        assert result.is_success is False

    def test_success_flag(self):
        result = UploadResult("https://x/u1", "app.apk", 201, UploadOutcome.SUCCESS)
        assert result.is_success is True


class TestTransferInterruptedError:
    def test_default_message_names_url(self):
        err = TransferInterruptedError("https://x/u1")
        assert err.url == "https://x/u1"
        assert "https://x/u1" in str(err)
