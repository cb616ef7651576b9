"""Unit tests for the CodeBuild build spec helpers."""

# Local Modules
from cdk.utils import (
    ScanProps,
    dependency_check_build_spec,
    dependency_check_install_commands,
    full_region_backup_build_spec,
    repository_backup_build_spec,
)

CLONE_URL = "https://git-codecommit.us-east-1.amazonaws.com/v1/repos/shop"


class TestRepositoryBackupBuildSpec:
    """Test cases for repository_backup_build_spec."""

    def test_clones_and_uploads(self):
        """Test the repository is cloned, archived and uploaded."""
        build_spec = repository_backup_build_spec(
            "shop", CLONE_URL, "backups"
        )

        assert build_spec["env"] == {"git-credential-helper": "yes"}
        assert f'git clone "{CLONE_URL}"' in (
            build_spec["phases"]["pre_build"]["commands"]
        )
        commands = build_spec["phases"]["build"]["commands"]
        assert 'zipfile="shop_backup_${dt}_UTC.tar.gz"' in commands
        assert 'tar -zcvf "${zipfile}" "shop/"' in commands
        assert commands[-1] == (
            'aws s3 cp "${zipfile}" "s3://backups/shop/${zipfile}"'
        )


class TestFullRegionBackupBuildSpec:
    """Test cases for full_region_backup_build_spec."""

    def test_runs_backup_script(self):
        """Test the script asset is downloaded and executed."""
        build_spec = full_region_backup_build_spec()

        pre_build = build_spec["phases"]["pre_build"]["commands"]
        assert "aws s3 cp s3://${SCRIPTS_BUCKET}/${SCRIPTS_BUCKET_KEY} ./" in (
            pre_build
        )
        assert build_spec["phases"]["build"]["commands"] == [
            "chmod +x backup_codecommit.sh",
            "./backup_codecommit.sh",
        ]


class TestDependencyCheckInstallCommands:
    """Test cases for dependency_check_install_commands."""

    def test_downloads_release(self):
        """Test the release archive of the version is installed."""
        commands = dependency_check_install_commands("5.3.2")

        assert any(
            "v5.3.2/dependency-check-5.3.2-release.zip" in command
            for command in commands
        )
        assert not any(command.startswith("gpg") for command in commands)

    def test_verifies_signature_with_key(self):
        """Test the archive is verified when a key id is given."""
        commands = dependency_check_install_commands("8.4.0", "F9514E84")

        assert (
            "gpg --verify dependency-check-8.4.0-release.zip.asc "
            "dependency-check-8.4.0-release.zip"
        ) in commands
        assert commands.index(
            "unzip -q dependency-check-8.4.0-release.zip -d /opt"
        ) > commands.index(
            "gpg --verify dependency-check-8.4.0-release.zip.asc "
            "dependency-check-8.4.0-release.zip"
        )


class TestDependencyCheckBuildSpec:
    """Test cases for dependency_check_build_spec."""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.scan = ScanProps(project_name="shop", basedir="shop")

    def test_scan_phases(self):
        """Test the clone, pre-check command and scan order."""
        build_spec = dependency_check_build_spec(
            "shop", CLONE_URL, self.scan, pre_check_command="npm ci"
        )

        pre_build = build_spec["phases"]["pre_build"]["commands"]
        assert pre_build.index("cd shop") < pre_build.index("npm ci")
        build = build_spec["phases"]["build"]["commands"]
        assert build[-2] == "dependency-check.sh --version"
        assert build[-1].startswith("dependency-check.sh --project shop")
        assert build_spec["reports"]["dependencyCheckReport"]["files"] == [
            "reports/dependency-check-junit.xml"
        ]

    def test_without_reports_bucket(self):
        """Test no upload happens without a reports bucket."""
        build_spec = dependency_check_build_spec("shop", CLONE_URL, self.scan)

        assert build_spec["phases"]["build"]["finally"][-1] == (
            'echo "No reportsBuckets"'
        )

    def test_with_reports_bucket(self):
        """Test the HTML report is uploaded under the repository."""
        build_spec = dependency_check_build_spec(
            "shop", CLONE_URL, self.scan, reports_bucket_name="reports-bucket"
        )

        assert build_spec["phases"]["build"]["finally"][-1] == (
            "aws s3 cp reports/dependency-check-report.html "
            "s3://reports-bucket/shop/${dt}_UTC/"
        )

    def test_nvd_data_is_cached(self):
        """Test the dependency-check data directory is cached."""
        build_spec = dependency_check_build_spec("shop", CLONE_URL, self.scan)

        assert build_spec["cache"]["paths"] == [
            "/opt/dependency-check/data/**/*"
        ]
