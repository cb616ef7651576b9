"""Unit tests for the dependency-check command line builder."""

# Third Party
import pytest

# Local Modules
from cdk.utils import DependencyCheckCli, ScanProps


class TestDependencyCheckCli:
    """Test cases for DependencyCheckCli."""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.cli = DependencyCheckCli()

    def test_version(self):
        """Test the version command."""
        assert self.cli.version() == "dependency-check.sh --version"

    def test_default_scan(self):
        """Test the scan command with default options."""
        command = self.cli.scan(ScanProps(project_name="shop", basedir="shop"))

        assert command == (
            "dependency-check.sh --project shop --format HTML --format JUNIT "
            "--out reports --failOnCVSS 0 --scan shop/."
        )

    def test_all_options(self):
        """Test paths, excludes, suppressions and experimental analyzers."""
        command = self.cli.scan(
            ScanProps(
                project_name="shop",
                basedir="shop",
                paths=["backend/", "frontend"],
                fail_on_cvss=7.5,
                enable_experimental=True,
                suppressions=["suppress.xml"],
                excludes=["**/node_modules/**"],
            )
        )

        assert "--failOnCVSS 7.5" in command
        assert "--scan shop/backend --scan shop/frontend" in command
        assert "--exclude '**/node_modules/**'" in command
        assert "--suppression suppress.xml" in command
        assert command.endswith("--enableExperimental")

    def test_arguments_are_quoted(self):
        """Test values with spaces are shell quoted."""
        command = self.cli.scan(
            ScanProps(project_name="my shop", basedir="shop")
        )

        assert "--project 'my shop'" in command

    @pytest.mark.parametrize("fail_on_cvss", [-1, 10.5])
    def test_fail_on_cvss_out_of_range(self, fail_on_cvss):
        """Test CVSS thresholds outside 0 to 10 are rejected."""
        with pytest.raises(ValueError, match="fail_on_cvss"):
            self.cli.scan(
                ScanProps(
                    project_name="shop",
                    basedir="shop",
                    fail_on_cvss=fail_on_cvss,
                )
            )
