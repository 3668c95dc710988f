"""
Tests for the license metric.
"""

from oss_trust_score.metrics.base import compute_metric
from oss_trust_score.metrics.license import (
    LICENSE_FILES,
    METRIC,
    check_license_compatibility,
    find_compatible_license,
)

DEFAULT_LICENSES = ["LGPLv2.1", "MIT", "Apache-2.0"]


class TestLicenseMetric:
    """Test license detection in a working tree."""

    def test_compatible_license_file(self, tmp_path):
        (tmp_path / "LICENSE").write_text("This project is licensed under the MIT License.")
        assert check_license_compatibility(tmp_path, DEFAULT_LICENSES) == 1

    def test_incompatible_license_file(self, tmp_path):
        (tmp_path / "LICENSE").write_text(
            "This project is licensed under the GPL-3.0 License."
        )
        assert check_license_compatibility(tmp_path, DEFAULT_LICENSES) == 0

    def test_compatible_license_in_readme(self, tmp_path):
        (tmp_path / "README.md").write_text(
            "This project is licensed under the LGPLv2.1 License."
        )
        assert check_license_compatibility(tmp_path, DEFAULT_LICENSES) == 1

    def test_neither_file_compatible(self, tmp_path):
        (tmp_path / "LICENSE.md").write_text("GPL-3.0")
        (tmp_path / "README").write_text("Licensed under GPL-3.0")
        assert check_license_compatibility(tmp_path, DEFAULT_LICENSES) == 0

    def test_empty_working_tree(self, tmp_path):
        assert check_license_compatibility(tmp_path, DEFAULT_LICENSES) == 0

    def test_custom_license_list(self, tmp_path):
        (tmp_path / "license.txt").write_text("GPL-3.0")
        assert check_license_compatibility(tmp_path, ["GPL-3.0"]) == 1

    def test_license_files_checked_in_order(self, tmp_path):
        (tmp_path / "LICENSE").write_text("Apache-2.0")
        (tmp_path / "license.md").write_text("MIT")
        assert (
            find_compatible_license(tmp_path, LICENSE_FILES, ["MIT", "Apache-2.0"])
            == "Apache-2.0"
        )

    def test_substring_match(self, tmp_path):
        """Identifiers match anywhere in the text, including inside words."""
        (tmp_path / "LICENSE").write_text("SUBMITTED")
        assert check_license_compatibility(tmp_path, ["MIT"]) == 1

    def test_default_licenses_from_config(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            "oss_trust_score.metrics.license.get_compatible_licenses",
            lambda: ["BSD-3-Clause"],
        )
        (tmp_path / "LICENSE").write_text("BSD-3-Clause")
        assert check_license_compatibility(tmp_path) == 1


class TestLicenseCollaborators:
    """Test working tree handling."""

    def test_metric_clones_and_cleans_up(
        self, fake_git, make_collaborators, subject
    ):
        git = fake_git({"LICENSE": "MIT License"})
        result = compute_metric(METRIC, subject, make_collaborators(git=git))

        assert result.name == "License"
        assert result.score == 1
        assert len(git.initialized) == 1
        url, destination = git.materialized[0]
        assert url == "https://github.com/owner/repo"
        assert destination == git.initialized[0]
        assert not destination.exists()

    def test_clone_failure_scores_zero(self, fake_git, make_collaborators, subject):
        git = fake_git(fail=True)
        result = compute_metric(METRIC, subject, make_collaborators(git=git))

        assert result.score == 0
        _, destination = git.materialized[0]
        assert not destination.exists()

    def test_each_invocation_uses_its_own_working_tree(
        self, fake_git, make_collaborators, subject
    ):
        git = fake_git({"LICENSE": "MIT"})
        collaborators = make_collaborators(git=git)
        compute_metric(METRIC, subject, collaborators)
        compute_metric(METRIC, subject, collaborators)

        first, second = (destination for _, destination in git.materialized)
        assert first != second
