import pytest


@pytest.mark.asyncio
class TestModuleRepository:

    async def test_create_and_read(self, module_repository):
        module = await module_repository.create({"module_name": "Payroll", "description": "Salary processing"})

        fetched = await module_repository.get_by_id(module.id)

        assert fetched.module_name == "Payroll"
        assert fetched.description == "Salary processing"
        assert fetched.is_active == "Y"

    async def test_list_order_name_then_updated_then_created(self, module_repository, create_module):
        leave_a = await create_module(module_name="Leave")
        payroll = await create_module(module_name="Payroll")
        leave_b = await create_module(module_name="Leave")
        attendance = await create_module(module_name="Attendance")
        await module_repository.update(leave_a.id, {"description": "touched"})

        page = await module_repository.list()

        assert [m.id for m in page.data] == [attendance.id, leave_a.id, leave_b.id, payroll.id]

    async def test_search_is_case_insensitive(self, module_repository, create_module):
        await create_module(module_name="Recruitment")
        await create_module(module_name="Payroll")

        page = await module_repository.list(search="RECRUIT")

        assert [m.module_name for m in page.data] == ["Recruitment"]

    async def test_date_range_is_not_applied(self, module_repository, create_module):
        await create_module(module_name="Payroll")

        page = await module_repository.list(start_date="1990-01-01", end_date="1990-01-02")

        assert page.total_count == 1

    async def test_is_active_filter(self, module_repository, create_module):
        await create_module(module_name="Payroll")
        legacy = await create_module(module_name="Legacy")
        await module_repository.update(legacy.id, {"is_active": "N"})

        page = await module_repository.list(is_active="N")

        assert [m.module_name for m in page.data] == ["Legacy"]
