from analyzers.extractors.edge_cases import EdgeCaseExtractor, is_extend_callee, is_setup_callee
from chunkers import ChunkKind


def test_exported_object_and_array_constants(parse) -> None:
    source = parse(
        """
        export const CONFIG = { retries: 3 };
        export const ROLES = ['admin', 'user'];
        export const TIMEOUT = 30;
        const PRIVATE = { hidden: true };
        """,
        path="src/config.ts",
    )

    chunks = EdgeCaseExtractor().extract(source)

    assert [(c.name, c.kind) for c in chunks] == [
        ("CONFIG", ChunkKind.CONSTANT),
        ("ROLES", ChunkKind.CONSTANT),
    ]
    assert chunks[0].location.start_column == len("export const ")


def test_setup_calls(parse) -> None:
    source = parse(
        """
        import { test as setup } from '@playwright/test';

        setup('authenticate', async ({ page }) => {
          await page.goto('/login');
        });

        test.use({ storageState: 'auth.json' });
        """,
        path="tests/auth.setup.ts",
    )

    chunks = EdgeCaseExtractor().extract(source)

    assert [(c.name, c.kind) for c in chunks] == [
        ("authenticate", ChunkKind.SETUP),
        ("Setup", ChunkKind.SETUP),
    ]
    assert chunks[0].location.start_line == 3


def test_fixtures_from_extend(parse) -> None:
    source = parse(
        """
        import { test as base } from '@playwright/test';

        export const test = base.extend({
          loginPage: async ({ page }, use) => {
            await use(new LoginPage(page));
          },
          adminUser: async ({}, use) => {
            await use('admin');
          },
        });
        """,
        path="src/fixtures.ts",
    )

    chunks = EdgeCaseExtractor().extract(source)

    assert [(c.name, c.kind) for c in chunks] == [
        ("loginPage", ChunkKind.FIXTURE),
        ("adminUser", ChunkKind.FIXTURE),
    ]
    assert chunks[0].location.start_line == 4


def test_iife_statements(parse) -> None:
    source = parse(
        """
        (function () {
          console.log('boot');
        })();

        const value = (() => 42)();
        """,
        path="src/bootstrap.js",
    )

    chunks = EdgeCaseExtractor().extract(source)

    assert [(c.name, c.kind) for c in chunks] == [("IIFE in bootstrap.js", ChunkKind.IIFE)]
    assert chunks[0].location.start_line == 1
    assert chunks[0].location.end_line == 3


def test_callee_predicates() -> None:
    assert is_setup_callee("setup")
    assert is_setup_callee("test.use")
    assert not is_setup_callee("setupPage")
    assert is_extend_callee("test.extend")
    assert is_extend_callee("base.extend")
    assert not is_extend_callee("Object.assign")
