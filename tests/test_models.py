import unittest

from models.category import Category, CategoryType, CreateDraft, EditDraft


class TestCategory(unittest.TestCase):
    def test_from_json(self):
        cat = Category.from_json({"id": 7, "name": "Rent", "type": "expense"})
        self.assertEqual(cat, Category(7, "Rent", "expense"))

    def test_from_json_prefers_id_over_underscore_id(self):
        cat = Category.from_json({"id": 1, "_id": "x", "name": "A", "type": "income"})
        self.assertEqual(cat.id, 1)

    def test_from_json_rejects_bad_payloads(self):
        for payload in (
            {"name": "No id", "type": "income"},
            {"id": 1, "name": "Both", "type": "both"},
            {"id": 1, "name": "Missing type"},
            ["not", "an", "object"],
        ):
            with self.assertRaises(ValueError):
                Category.from_json(payload)


class TestDrafts(unittest.TestCase):
    def test_create_draft_defaults_to_expense(self):
        draft = CreateDraft()
        self.assertEqual(draft.name, "")
        self.assertEqual(draft.type, CategoryType.EXPENSE.value)

    def test_with_values_keeps_variant(self):
        draft = EditDraft(id=2, name="Rent", type="expense").with_values(name="Housing")
        self.assertIsInstance(draft, EditDraft)
        self.assertEqual(draft.body(), {"name": "Housing", "type": "expense"})
        self.assertEqual(draft.id, 2)

    def test_invalid_type_rejected(self):
        with self.assertRaises(ValueError):
            CreateDraft(name="x", type="transfer")
        with self.assertRaises(ValueError):
            CreateDraft().with_values(type_="both")

    def test_enum_member_is_normalised(self):
        self.assertEqual(CreateDraft(type=CategoryType.INCOME).type, "income")

    def test_from_category(self):
        draft = EditDraft.from_category(Category(2, "Rent", "expense"))
        self.assertEqual(draft, EditDraft(id=2, name="Rent", type="expense"))


if __name__ == "__main__":
    unittest.main()
