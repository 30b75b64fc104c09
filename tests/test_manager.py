import json
from pathlib import Path

import pytest

from index.manager import IndexManager
from index.output import OUTPUT_VERSION, save_chunks_to_json
from settings.config import Settings

LOGIN_PAGE = """
import { Page, Locator } from '@playwright/test';

export class LoginPage {
  readonly loginBtn: Locator;

  constructor(page: Page) {
    this.loginBtn = page.getByRole('button');
  }

  async clickLogin() {
    await this.loginBtn.click();
  }
}
"""

LOGIN_SPEC = """
import { test } from '@playwright/test';
import { LoginPage } from '../src/page-objects/login.page';

test.describe('Login', () => {
  test('logs in', async ({ page }) => {
    await new LoginPage(page).clickLogin();
  });
});
"""


def _write(path: Path, content: str | bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content.lstrip("\n"), encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    _write(tmp_path / "src" / "page-objects" / "login.page.ts", LOGIN_PAGE)
    _write(tmp_path / "src" / "config.ts", "export const CONFIG = { retries: 3 };\n")
    _write(tmp_path / "tests" / "login.spec.ts", LOGIN_SPEC)
    _write(tmp_path / "node_modules" / "pkg" / "index.js", "function ignored() {}\n")
    return tmp_path


@pytest.fixture
def manager(analyzer) -> IndexManager:
    return IndexManager(Settings(_env_file=None, project_type="playwright"), analyzer)


def test_playwright_index_links_page_objects_and_tests(manager: IndexManager, project: Path) -> None:
    result = manager.index(path=str(project))

    by_name = {c.name: c for c in result.chunks}
    assert result.files == ["src/config.ts", "src/page-objects/login.page.ts", "tests/login.spec.ts"]
    assert by_name["loginBtn"].related_test_files == ("tests/login.spec.ts",)
    assert by_name["LoginPage_actions"].kind.value == "action"
    assert by_name["CONFIG"].kind.value == "constant"
    assert by_name["logs in"].test_suite_name == "Login"
    assert result.graph.classes_for_test("tests/login.spec.ts") == ("LoginPage",)
    assert result.summary()["by_kind"] == {"constant": 1, "locator": 1, "action": 1, "test": 1}


def test_index_is_idempotent(manager: IndexManager, project: Path) -> None:
    first = manager.index(path=str(project), include_code=True)
    second = manager.index(path=str(project), include_code=True)

    assert [c.to_record() for c in first.chunks] == [c.to_record() for c in second.chunks]


def test_generic_profile_override(manager: IndexManager, project: Path) -> None:
    result = manager.index(path=str(project), project_type="angular")

    kinds = {c.kind.value for c in result.chunks}
    assert kinds <= {"function", "method", "constructor", "class"}
    assert len(result.graph) == 0


def test_target_restricts_scan(manager: IndexManager, project: Path) -> None:
    result = manager.index(path=str(project), target="tests")

    assert result.files == ["tests/login.spec.ts"]
    assert result.graph.tests_for_class("LoginPage") == ("tests/login.spec.ts",)


def test_failed_files_are_recorded(manager: IndexManager, project: Path) -> None:
    _write(project / "src" / "broken.ts", b"\xff\xfe not utf-8")

    result = manager.index(path=str(project))

    assert result.failed_files == ["src/broken.ts"]
    assert "loginBtn" in {c.name for c in result.chunks}


def test_save_chunks_to_json(manager: IndexManager, project: Path, tmp_path: Path) -> None:
    result = manager.index(path=str(project))

    output = save_chunks_to_json(result.chunks, tmp_path / "out" / "chunks.json")
    document = json.loads(output.read_text(encoding="utf-8"))

    assert document["metadata"]["totalChunks"] == len(result.chunks)
    assert document["metadata"]["version"] == OUTPUT_VERSION
    assert document["chunks"][0]["location"]["file"] == "src/config.ts"
