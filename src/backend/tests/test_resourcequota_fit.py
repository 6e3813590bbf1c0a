"""Tests for limit-set fit checking (namespace default quota vs project quota)."""

import copy

import pytest

from projectgate.errors import QuantityParseError
from projectgate.resourcequota.fit import FitResult, is_quota_fit


class TestIsQuotaFit:
    def test_child_within_parent_fits(self):
        result = is_quota_fit(
            {"memory": "1Gi", "cpu": "500m"}, [], {"memory": "2Gi", "cpu": "500m"}
        )
        assert result.fits is True
        assert result.violations == []
        assert result.message == ""

    def test_child_exceeding_parent_reports_resource(self):
        result = is_quota_fit({"memory": "4Gi"}, [], {"memory": "2Gi"})
        assert result.fits is False
        assert result.violations == ["memory"]
        assert result.message == "memory=4Gi"

    def test_equal_limits_fit(self):
        result = is_quota_fit({"limits.cpu": "2"}, [], {"limits.cpu": "2000m"})
        assert result.fits is True

    def test_units_are_normalized_before_comparing(self):
        result = is_quota_fit({"requests.memory": "1500Mi"}, [], {"requests.memory": "1G"})
        assert result.fits is False
        assert result.violations == ["requests.memory"]

    def test_all_violations_reported_sorted(self):
        child = {"pods": "20", "memory": "4Gi", "cpu": "3", "services": "1"}
        parent = {"pods": "10", "memory": "2Gi", "cpu": "2", "services": "5"}
        result = is_quota_fit(child, [], parent)
        assert result.fits is False
        assert result.violations == ["cpu", "memory", "pods"]
        assert result.message == "cpu=3,memory=4Gi,pods=20"

    def test_resource_missing_from_parent_is_unbounded(self):
        result = is_quota_fit({"pods": "1000", "cpu": "1"}, [], {"cpu": "2"})
        assert result.fits is True

    def test_resource_only_in_parent_never_fails(self):
        result = is_quota_fit({"cpu": "1"}, [], {"cpu": "2", "memory": "0"})
        assert result.fits is True

    def test_zero_parent_limit_rejects_any_request(self):
        result = is_quota_fit({"services.loadbalancers": "1"}, [], {"services.loadbalancers": "0"})
        assert result.fits is False
        assert result.violations == ["services.loadbalancers"]

    def test_zero_child_fits_zero_parent(self):
        result = is_quota_fit({"services.loadbalancers": "0"}, [], {"services.loadbalancers": "0"})
        assert result.fits is True

    def test_custom_resource_names_are_supported(self):
        result = is_quota_fit(
            {"requests.nvidia.com/gpu": "4"}, [], {"requests.nvidia.com/gpu": "2"}
        )
        assert result.violations == ["requests.nvidia.com/gpu"]

    def test_empty_child_fits(self):
        assert is_quota_fit({}, [], {"cpu": "1"}).fits is True

    def test_empty_values_are_ignored(self):
        result = is_quota_fit({"cpu": "", "memory": "1Gi"}, [], {"cpu": "1", "memory": ""})
        assert result.fits is True

    def test_intermediate_tiers_add_to_child(self):
        result = is_quota_fit(
            {"cpu": "1"}, [{"cpu": "500m"}, {"cpu": "1"}], {"cpu": "2"}
        )
        assert result.fits is False
        assert result.violations == ["cpu"]
        assert result.message == "cpu=2500m"

    def test_intermediate_tiers_within_parent_fit(self):
        result = is_quota_fit({"cpu": "1"}, [{"cpu": "500m"}], {"cpu": "2"})
        assert result.fits is True

    def test_malformed_child_quantity_raises(self):
        with pytest.raises(QuantityParseError) as exc_info:
            is_quota_fit({"memory": "lots"}, [], {"memory": "2Gi"})
        assert exc_info.value.field == "memory"
        assert "memory" in exc_info.value.message

    def test_malformed_parent_quantity_raises(self):
        with pytest.raises(QuantityParseError):
            is_quota_fit({"cpu": "1"}, [], {"cpu": "two"})

    def test_inputs_are_not_mutated(self):
        child = {"cpu": "1", "memory": "4Gi"}
        intermediate = [{"cpu": "1"}]
        parent = {"cpu": "1", "memory": "2Gi"}
        snapshot = copy.deepcopy((child, intermediate, parent))

        is_quota_fit(child, intermediate, parent)

        assert (child, intermediate, parent) == snapshot

    def test_repeated_calls_are_identical(self):
        child = {"cpu": "3", "memory": "4Gi"}
        parent = {"cpu": "2", "memory": "8Gi"}
        assert is_quota_fit(child, [], parent) == is_quota_fit(child, [], parent)

    def test_result_is_fit_result(self):
        assert isinstance(is_quota_fit({}, [], {}), FitResult)

    def test_request_one_above_a_huge_limit_is_not_rounded_away(self):
        parent = {"pods": "1" + "0" * 62}
        child = {"pods": "1" + "0" * 61 + "1"}
        result = is_quota_fit(child, [], parent)
        assert result.fits is False
        assert result.violations == ["pods"]

    def test_count_beyond_precision_raises_instead_of_fitting(self):
        with pytest.raises(QuantityParseError):
            is_quota_fit({"pods": "1" + "0" * 69 + "1"}, [], {"pods": "1" + "0" * 70})

    def test_vanishingly_small_request_raises_instead_of_fitting_zero(self):
        with pytest.raises(QuantityParseError):
            is_quota_fit({"cpu": "1e-9999999"}, [], {"cpu": "0"})

    def test_smallest_positive_request_exceeds_zero_limit(self):
        result = is_quota_fit({"cpu": "1n"}, [], {"cpu": "0"})
        assert result.fits is False
        assert result.message == "cpu=0.000000001"
