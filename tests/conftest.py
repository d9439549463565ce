"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local phpunit_mcp package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of phpunit_mcp modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("phpunit_mcp"):
        del sys.modules[module_name]


USER_TEST_PHP = """<?php

namespace App\\Tests;

use PHPUnit\\Framework\\TestCase;

class UserTest extends TestCase
{
    public function testCreate(): void
    {
        $this->assertTrue(true);
    }

    public function testDelete(): void
    {
        $this->assertTrue(true);
    }

    private function helper(): void
    {
    }
}
"""

PHPUNIT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<phpunit bootstrap="vendor/autoload.php" colors="true">
    <testsuites>
        <testsuite name="Unit">
            <directory>tests/Unit</directory>
        </testsuite>
        <testsuite name="Integration">
            <directory>tests/Integration</directory>
        </testsuite>
    </testsuites>
</phpunit>
"""

JUNIT_WITH_FAILURES = """<?xml version="1.0" encoding="UTF-8"?>
<testsuites>
  <testsuite name="App" tests="4" assertions="6" errors="1" failures="1" warnings="0" skipped="1" time="1.234567">
    <testcase name="testCreate" class="App\\Tests\\UserTest" classname="App.Tests.UserTest" file="/project/tests/UserTest.php" line="12" assertions="1" time="0.010">
      <failure type="PHPUnit\\Framework\\ExpectationFailedException">App\\Tests\\UserTest::testCreate
Failed asserting that 404 is identical to 200.</failure>
    </testcase>
    <testcase name="testDelete" class="App\\Tests\\UserTest" classname="App.Tests.UserTest" file="/project/tests/UserTest.php" line="20" assertions="2" time="0.020"/>
    <testcase name="testFind" class="App\\Tests\\OrderTest" classname="App.Tests.OrderTest" file="/project/tests/OrderTest.php" line="8" assertions="0" time="0.005">
      <error type="RuntimeException">App\\Tests\\OrderTest::testFind
RuntimeException: Connection refused</error>
    </testcase>
    <testcase name="testSkip" class="App\\Tests\\OrderTest" classname="App.Tests.OrderTest" file="/project/tests/OrderTest.php" line="30" assertions="0" time="0.000">
      <skipped/>
    </testcase>
  </testsuite>
</testsuites>
"""

JUNIT_PASSING = """<?xml version="1.0" encoding="UTF-8"?>
<testsuites>
  <testsuite name="App" tests="2" assertions="2" errors="0" failures="0" warnings="0" skipped="0" time="0.5">
    <testcase name="testCreate" class="App\\Tests\\UserTest" file="/project/tests/UserTest.php" line="12" assertions="1" time="0.25"/>
    <testcase name="testDelete" class="App\\Tests\\UserTest" file="/project/tests/UserTest.php" line="20" assertions="1" time="0.25"/>
  </testsuite>
</testsuites>
"""


@pytest.fixture
def php_project(tmp_path: Path) -> Path:
    """A PHP project with a phpunit.xml and two test directories."""
    (tmp_path / "composer.json").write_text("{}")
    (tmp_path / "phpunit.xml").write_text(PHPUNIT_XML)
    unit = tmp_path / "tests" / "Unit"
    unit.mkdir(parents=True)
    (unit / "UserTest.php").write_text(USER_TEST_PHP)
    (tmp_path / "tests" / "Integration").mkdir()
    return tmp_path


@pytest.fixture
def junit_with_failures() -> str:
    return JUNIT_WITH_FAILURES


@pytest.fixture
def junit_passing() -> str:
    return JUNIT_PASSING
