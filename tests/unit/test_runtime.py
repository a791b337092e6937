import os
import shutil
import tempfile
import time
import unittest
from unittest.mock import patch

from stackprobe.config import DetectionSettings, HealthSettings
from stackprobe.http import HttpResponse
from stackprobe.http.adapters import StubHttpClient
from stackprobe.runtime import StackProbe


class TestStackProbeRuntime(unittest.TestCase):
    def _project(self, files):
        root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, root, True)
        for rel, content in files.items():
            path = os.path.join(root, rel)
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(content)
        return root

    def test_detect_and_check_health_reuses_injected_client_and_closes(self):
        root = self._project(
            {
                "go.mod": "module example.com/api\n\ngo 1.22\n\nrequire github.com/gin-gonic/gin v1.9.1\n",
                "main.go": 'package main\n\nimport "github.com/gin-gonic/gin"\n',
            }
        )
        client = StubHttpClient({"http://localhost:8080/ping": HttpResponse(status_code=200)})
        with (
            StackProbe(
                http_client=client,
                detection_settings=DetectionSettings(),
                health_settings=HealthSettings(attempts=1, retry_delay=0),
            ) as probe,
            patch.object(time, "sleep") as sleep,
        ):
            detection = probe.detect(root)
            self.assertEqual(detection.framework, "Gin")
            self.assertEqual(detection.healthcheck.path, "/ping")
            self.assertEqual(detection.meta["runtime_version"], "1.22")

            health = probe.check_health("http://localhost:8080", detection)
            self.assertTrue(health.ok)
            self.assertEqual(client.calls, [("http://localhost:8080/ping", 30.0)])
            sleep.assert_not_called()

        self.assertTrue(client.closed)

    def test_hugo_dev_server_is_health_checked(self):
        root = self._project({"config.toml": "baseURL = '/'", "content/_index.md": "# hi"})
        client = StubHttpClient()
        with StackProbe(
            http_client=client,
            detection_settings=DetectionSettings(),
            health_settings=HealthSettings(attempts=2, retry_delay=0),
        ) as stack:
            detection = stack.detect(root)
            self.assertEqual(detection.framework, "Hugo")
            self.assertFalse(detection.is_static)
            health = stack.check_health("http://localhost:1313", detection)

        self.assertFalse(health.skipped)
        self.assertFalse(health.ok)
        self.assertEqual(health.attempts, 2)
        self.assertEqual(len(client.calls), 2)

    def test_static_export_is_skipped(self):
        root = self._project(
            {"astro.config.mjs": "export default {}", "package.json": '{"dependencies": {"astro": "^4.0.0"}}'}
        )
        client = StubHttpClient()
        with StackProbe(http_client=client, detection_settings=DetectionSettings()) as stack:
            detection = stack.detect(root)
            self.assertEqual(detection.framework, "Astro")
            health = stack.check_health("http://localhost:4321", detection)

        self.assertTrue(health.skipped)
        self.assertTrue(health.ok)
        self.assertEqual(client.calls, [])


if __name__ == "__main__":
    unittest.main()
