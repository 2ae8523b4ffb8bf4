import tempfile
import unittest
from pathlib import Path

from lightset.config.interfaces import ConfigLoader
from lightset.config.loader import LightsetLoader
from lightset.config.models import ConfigLoadRequest, LoaderSettings


class ConfigLoadRequestTests(unittest.TestCase):
    def test_origin(self) -> None:
        self.assertEqual(ConfigLoadRequest(path="a.conf").origin(), "path")
        self.assertEqual(ConfigLoadRequest(package="pkg", resource="a.conf").origin(), "resource")
        self.assertEqual(ConfigLoadRequest(url="http://x/a.conf").origin(), "url")
        self.assertEqual(ConfigLoadRequest(text="").origin(), "text")

    def test_exactly_one_origin(self) -> None:
        with self.assertRaises(ValueError):
            ConfigLoadRequest().origin()
        with self.assertRaises(ValueError):
            ConfigLoadRequest(path="a.conf", text="a=1").origin()

    def test_resource_needs_package(self) -> None:
        with self.assertRaises(ValueError):
            ConfigLoadRequest(resource="a.conf").origin()


class LightsetLoaderTests(unittest.IsolatedAsyncioTestCase):
    async def test_loads_text_request(self) -> None:
        loader: ConfigLoader = LightsetLoader()
        config = await loader.load(ConfigLoadRequest(text="a=1\nb=2d\n"))
        self.assertEqual(config.to_dict(), {"a": 1, "b": 2.0})
        self.assertEqual(config["b"].kind, "double")

    async def test_loads_path_request_with_settings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "app.conf"
            path.write_bytes("name=café\n".encode("latin-1"))
            loader = LightsetLoader(LoaderSettings(encoding="latin-1"))
            config = await loader.load(ConfigLoadRequest(path=str(path)))
        self.assertEqual(config.get_str("name"), "café")

    async def test_missing_path_propagates(self) -> None:
        with self.assertRaises(FileNotFoundError):
            await LightsetLoader().load(ConfigLoadRequest(path="/nonexistent/lightset/app.conf"))

    async def test_invalid_request(self) -> None:
        with self.assertRaises(ValueError):
            await LightsetLoader().load(ConfigLoadRequest())

    def test_default_settings(self) -> None:
        self.assertEqual(LightsetLoader().settings, LoaderSettings())


if __name__ == "__main__":
    unittest.main()
