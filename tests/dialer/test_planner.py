# -*- coding: utf-8 -*-
import pytest

from dialer.config_models import DialerSettings, InstallRequest, MediaSettings
from dialer.exceptions import DialerValidationError
from dialer.planner import InstallPlanner, build_install_plan

CCS_ONLY_STEPS = {"ccs_package", "ccs_database_script", "ccs_database", "ccs_connection_file"}


def test_ods_plan_order(planner, ods_request):
    plan = planner.plan(ods_request)
    assert plan.step_names() == [
        "mount_media",
        "dotnet35",
        "sql_native_client",
        "ods_package",
        "unmount_media",
    ]


def test_ccs_plan_order(planner, ccs_request):
    plan = planner.plan(ccs_request)
    assert plan.step_names() == [
        "mount_media",
        "dotnet35",
        "sql_native_client",
        "ccs_package",
        "ccs_database_script",
        "ccs_database",
        "ccs_connection_file",
        "unmount_media",
    ]


def test_ods_plan_has_no_ccs_artifacts(planner, ods_request):
    plan = planner.plan(ods_request)
    assert CCS_ONLY_STEPS.isdisjoint(plan.step_names())
    for step in plan.steps:
        assert "CCS" not in step.title
        assert "ccs" not in " ".join(step.requires)


def test_ods_plan_ignores_a_supplied_server_name(planner, ods_request):
    request = ods_request.model_copy(update={"ccs_server_name": "SQL01"})
    plan = planner.plan(request)
    assert CCS_ONLY_STEPS.isdisjoint(plan.step_names())


def test_ccs_plan_has_no_ods_artifacts(planner, ccs_request):
    plan = planner.plan(ccs_request)
    assert not plan.contains("ods_package")
    assert all("ODS" not in step.title for step in plan.steps)


def test_product_package_requires_mount_and_dotnet(planner, ods_request, ccs_request):
    assert planner.plan(ods_request).get_step("ods_package").requires == ["mount_media", "dotnet35"]
    assert planner.plan(ccs_request).get_step("ccs_package").requires == ["mount_media", "dotnet35"]


def test_prerequisites_require_mount(planner, ods_request):
    plan = planner.plan(ods_request)
    assert plan.get_step("dotnet35").requires == ["mount_media"]
    assert plan.get_step("sql_native_client").requires == ["mount_media"]
    assert plan.get_step("mount_media").requires == []


def test_unmount_waits_for_everything_reading_the_media(planner, ods_request, ccs_request):
    assert planner.plan(ods_request).get_step("unmount_media").requires == [
        "sql_native_client",
        "ods_package",
    ]
    assert planner.plan(ccs_request).get_step("unmount_media").requires == [
        "sql_native_client",
        "ccs_package",
        "ccs_database_script",
        "ccs_database",
        "ccs_connection_file",
    ]


def test_requirements_always_point_backwards(planner, ods_request, ccs_request):
    for request in (ods_request, ccs_request):
        seen = set()
        for step in planner.plan(request).steps:
            assert set(step.requires) <= seen
            seen.add(step.name)


def test_ccs_steps_use_server_name(planner, ccs_request):
    plan = planner.plan(ccs_request)
    database = plan.get_step("ccs_database")
    assert '-S "SQL01\\DIALER"' in database.attributes["command"]
    assert '-S "SQL01\\DIALER"' in database.attributes["unless"]
    assert "DB_ID('DialerCCS')" in database.attributes["unless"]
    connection = plan.get_step("ccs_connection_file")
    assert connection.resource_type == "file"
    assert "Data Source=SQL01\\DIALER" in connection.attributes["content"]
    assert "Initial Catalog=DialerCCS" in connection.attributes["content"]


def test_product_package_source_uses_drive_and_version(planner, ods_request):
    package = planner.plan(ods_request).get_step("ods_package")
    assert package.resource_type == "package"
    assert package.title == "Dialer ODS"
    assert package.attributes["ensure"] == "installed"
    assert package.attributes["source"] == "D:\\ODS\\DialerODS_5.2.1.msi"


def test_settings_drive_flows_into_steps(ods_request):
    settings = DialerSettings(media=MediaSettings(drive="E:\\", iso_path="C:\\media\\x.iso"))
    plan = InstallPlanner(settings).plan(ods_request)
    assert plan.get_step("ods_package").attributes["source"] == "E:\\ODS\\DialerODS_5.2.1.msi"
    assert "/source:E:\\sources\\sxs" in plan.get_step("dotnet35").attributes["command"]
    assert plan.get_step("sql_native_client").attributes["source"] == "E:\\prereqs\\sqlncli.msi"
    assert "'C:\\media\\x.iso'" in plan.get_step("mount_media").attributes["command"]


def test_invalid_request_produces_no_plan(planner):
    with pytest.raises(DialerValidationError, match="Unsupported OS"):
        planner.plan(InstallRequest(operating_system="Not Windows", product="ODS", version="1"))


def test_build_install_plan_uses_defaults(ccs_request):
    plan = build_install_plan(ccs_request)
    assert plan.request == ccs_request
    assert len(plan) == 8


def test_applicable_steps_filters_by_product(planner):
    assert "ods_package" in planner.applicable_steps("ODS")
    assert "ccs_database" not in planner.applicable_steps("ODS")
    assert "ods_package" not in planner.applicable_steps("CCS")


def test_get_step_unknown_name_raises(planner, ods_request):
    with pytest.raises(KeyError, match="ccs_database"):
        planner.plan(ods_request).get_step("ccs_database")


def test_every_exec_step_uses_the_configured_search_path(ccs_request):
    settings = DialerSettings(exec_path="C:\\Tools;C:\\Windows\\System32")
    plan = InstallPlanner(settings).plan(ccs_request)
    exec_steps = [step for step in plan.steps if step.resource_type == "exec"]
    assert [step.name for step in exec_steps] == ["mount_media", "dotnet35", "ccs_database", "unmount_media"]
    for step in exec_steps:
        assert step.attributes["path"] == "C:\\Tools;C:\\Windows\\System32"


def test_product_package_passes_no_msiexec_switches(planner, ods_request):
    package = planner.plan(ods_request).get_step("ods_package")
    assert "install_options" not in package.attributes
