import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.exceptions import ConstraintViolation, EntityNotFound, InvalidParameter
from models.base import Base
from models.department import Department
from repositories.department_repository import DepartmentRepository
from schemas.department import DepartmentCreate, DepartmentUpdate


class DepartmentRepositoryTests(unittest.TestCase):
    def setUp(self):
        # Fresh in-memory DB
        self.engine = create_engine("sqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)

        TestingSession = sessionmaker(bind=self.engine, future=True)
        self.db = TestingSession()

        self.db.add_all([
            Department(code="CSE", name="Computer Science", floor=3, description="Labs"),
            Department(code="IT", name="Information Technology", floor=1, description=""),
        ])
        self.db.commit()

        self.repo = DepartmentRepository(self.db)

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    # ---- create ----
    def test_create_returns_persisted_record(self):
        created = self.repo.create(DepartmentCreate(code="ECE", name="Electronics", floor=2))
        self.assertEqual(created.code, "ECE")
        self.assertEqual(created.description, "")

        again = self.repo.get_by_code("ECE")
        self.assertEqual(again.name, "Electronics")
        self.assertEqual(again.floor, 2)

    def test_create_duplicate_name_is_constraint_violation(self):
        with self.assertRaises(ConstraintViolation):
            self.repo.create(DepartmentCreate(code="ME", name="Computer Science", floor=4))
        # session is still usable after the rollback
        self.assertEqual(len(self.repo.get()), 2)

    # ---- get / get_by_code ----
    def test_get_returns_all_ordered_by_code(self):
        rows = self.repo.get()
        self.assertEqual([r.code for r in rows], ["CSE", "IT"])

    def test_get_empty_table(self):
        self.db.query(Department).delete()
        self.db.commit()
        self.assertEqual(self.repo.get(), [])

    def test_get_by_code_not_found(self):
        with self.assertRaises(EntityNotFound) as ctx:
            self.repo.get_by_code("EEE")
        self.assertEqual(ctx.exception.entity, "department")
        self.assertEqual(ctx.exception.value, "EEE")

    # ---- update ----
    def test_update_only_supplied_fields(self):
        updated = self.repo.update("CSE", DepartmentUpdate(floor=5))
        self.assertEqual(updated.floor, 5)
        self.assertEqual(updated.name, "Computer Science")
        self.assertEqual(updated.description, "Labs")

    def test_update_skips_empty_strings(self):
        updated = self.repo.update("CSE", DepartmentUpdate(name="", description="New labs"))
        self.assertEqual(updated.name, "Computer Science")
        self.assertEqual(updated.description, "New labs")

    def test_update_without_fields_is_invalid(self):
        with self.assertRaises(InvalidParameter) as ctx:
            self.repo.update("CSE", DepartmentUpdate())
        self.assertEqual(ctx.exception.param, "update_fields")

    def test_update_missing_department(self):
        with self.assertRaises(EntityNotFound):
            self.repo.update("ME", DepartmentUpdate(floor=2))

    # ---- delete ----
    def test_delete_removes_row(self):
        self.repo.delete("IT")
        with self.assertRaises(EntityNotFound):
            self.repo.get_by_code("IT")

    def test_delete_missing_row(self):
        with self.assertRaises(EntityNotFound):
            self.repo.delete("ME")

    # ---- exists_by_name ----
    def test_exists_by_name(self):
        self.assertTrue(self.repo.exists_by_name("Computer Science"))
        self.assertFalse(self.repo.exists_by_name("Mechanical"))

    def test_exists_by_name_excluding_own_code(self):
        self.assertFalse(self.repo.exists_by_name("Computer Science", exclude_code="CSE"))
        self.assertTrue(self.repo.exists_by_name("Computer Science", exclude_code="IT"))


if __name__ == "__main__":
    unittest.main()
