import re
import unittest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from nexthire.core.exceptions import InternalFailure
from nexthire.services.application_store import ApplicationStore
from nexthire.services.job_store import JobStore
from nexthire.services.subscription_store import SubscriptionStore
from tests.fakes import make_job


def mock_collection(documents=None):
    """A motor collection whose find() cursor yields ``documents``."""
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=list(documents or []))

    collection = MagicMock()
    collection.find.return_value = cursor
    collection.distinct = AsyncMock()
    collection.find_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.update_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection, cursor


def matches(query, document):
    """Evaluate the subset of Mongo query syntax the stores use."""
    for key, condition in query.items():
        if key == "$or":
            if not any(matches(sub, document) for sub in condition):
                return False
        elif isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            # Python spells the absolute end anchor \Z
            pattern = re.sub(r"\\z$", r"\\Z", condition["$regex"])
            value = document.get(key)
            if not isinstance(value, str) or not re.search(pattern, value, flags):
                return False
        elif document.get(key) != condition:
            return False
    return True


class TestJobStoreQueries(unittest.IsolatedAsyncioTestCase):
    async def test_find_active_filters_on_status(self):
        collection, _ = mock_collection([make_job()])
        store = JobStore(collection)

        jobs = await store.find_active()

        collection.find.assert_called_once_with({"status": "active"})
        self.assertEqual(len(jobs), 1)

    async def test_company_lookup_is_case_insensitive_exact_match(self):
        collection, _ = mock_collection()
        store = JobStore(collection)

        await store.find_active_by_company("Acme")

        query = collection.find.call_args.args[0]
        self.assertEqual(query["status"], "active")
        self.assertTrue(matches(query, {"company": "acme", "status": "active"}))
        self.assertTrue(matches(query, {"company": "ACME", "status": "active"}))
        self.assertFalse(matches(query, {"company": "Acme Corp", "status": "active"}))
        self.assertFalse(matches(query, {"company": "The Acme", "status": "active"}))

    async def test_company_lookup_escapes_regex_characters(self):
        collection, _ = mock_collection()
        store = JobStore(collection)

        await store.find_active_by_company("A+B (Labs)")

        query = collection.find.call_args.args[0]
        self.assertTrue(matches(query, {"company": "a+b (labs)", "status": "active"}))
        self.assertFalse(matches(query, {"company": "AAB Labs", "status": "active"}))

    async def test_company_lookup_anchors_to_whole_value(self):
        collection, _ = mock_collection()
        store = JobStore(collection)

        await store.find_active_by_company("Acme")

        query = collection.find.call_args.args[0]
        self.assertEqual(query["company"]["$regex"], r"\AAcme\z")
        self.assertFalse(matches(query, {"company": "Acme\n", "status": "active"}))

    async def test_search_matches_any_text_field(self):
        collection, _ = mock_collection()
        store = JobStore(collection)
        jobs = [
            make_job(title="Senior Engineer", description="x", category="Ops"),
            make_job(title="Designer", company="Engineering Co", description="x", category="Design"),
            make_job(title="Designer", category="Design", location="Engineer Street", description="x"),
            make_job(title="Designer", category="Design", description="Work with ENGINEERS"),
            make_job(title="Sales", company="Acme", category="Sales", description="Sell"),
            make_job(title="Designer", category="Design", description=None),
        ]

        await store.search("engineer")

        query = collection.find.call_args.args[0]
        self.assertEqual(
            {field for clause in query["$or"] for field in clause},
            {"title", "company", "category", "location", "description"},
        )
        matched = [matches(query, job) for job in jobs]
        self.assertEqual(matched, [True, True, True, True, False, False])

    async def test_search_treats_query_literally(self):
        collection, _ = mock_collection()
        store = JobStore(collection)

        await store.search("c++")

        query = collection.find.call_args.args[0]
        self.assertTrue(matches(query, make_job(title="C++ Developer")))
        self.assertFalse(matches(query, make_job(title="Cobol Developer", description="c")))

    async def test_page_skips_previous_pages_newest_first(self):
        collection, cursor = mock_collection()
        store = JobStore(collection)

        await store.page(2, 5)

        cursor.sort.assert_called_once_with("createdAt", -1)
        cursor.skip.assert_called_once_with(5)
        cursor.limit.assert_called_once_with(5)

    async def test_featured_sorts_featured_then_newest(self):
        collection, cursor = mock_collection()
        store = JobStore(collection)

        await store.featured(15)

        cursor.sort.assert_called_once_with([("isFeatured", -1), ("createdAt", -1)])
        cursor.limit.assert_called_once_with(15)

    async def test_insert_stamps_created_at(self):
        collection, _ = mock_collection()
        new_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=new_id)
        store = JobStore(collection)

        inserted_id = await store.insert({"title": "QA", "createdAt": "yesterday"})

        self.assertEqual(inserted_id, new_id)
        document = collection.insert_one.call_args.args[0]
        self.assertIsInstance(document["createdAt"], datetime)
        self.assertEqual(document["title"], "QA")

    async def test_increment_uses_atomic_inc(self):
        collection, _ = mock_collection()
        job_id = ObjectId()
        collection.find_one_and_update.return_value = {"_id": job_id, "applicationCount": 3}
        store = JobStore(collection)

        job = await store.increment_application_count(job_id)

        collection.find_one_and_update.assert_awaited_once_with(
            {"_id": job_id},
            {"$inc": {"applicationCount": 1}},
            return_document=ReturnDocument.AFTER,
        )
        self.assertEqual(job["applicationCount"], 3)

    async def test_increment_missing_job_returns_none(self):
        collection, _ = mock_collection()
        collection.find_one_and_update.return_value = None
        store = JobStore(collection)

        self.assertIsNone(await store.increment_application_count(ObjectId()))

    async def test_decrement_takes_back_one_application(self):
        collection, _ = mock_collection()
        job_id = ObjectId()
        store = JobStore(collection)

        await store.decrement_application_count(job_id)

        collection.update_one.assert_awaited_once_with(
            {"_id": job_id}, {"$inc": {"applicationCount": -1}}
        )

    async def test_malformed_reference_resolves_to_none_without_querying(self):
        collection, _ = mock_collection()
        store = JobStore(collection)

        self.assertIsNone(await store.get_by_reference("not-an-object-id"))
        self.assertIsNone(await store.get_by_reference(None))
        collection.find_one.assert_not_awaited()

    async def test_valid_reference_is_looked_up_by_object_id(self):
        collection, _ = mock_collection()
        job = make_job()
        collection.find_one.return_value = job
        store = JobStore(collection)

        result = await store.get_by_reference(str(job["_id"]))

        self.assertIs(result, job)
        collection.find_one.assert_awaited_once_with({"_id": job["_id"]})

    async def test_distinct_returns_values(self):
        collection, _ = mock_collection()
        collection.distinct.return_value = ["Engineering", "Design"]
        store = JobStore(collection)

        self.assertEqual(await store.distinct("category"), ["Engineering", "Design"])
        collection.distinct.assert_awaited_once_with("category")

    async def test_driver_errors_become_internal_failures(self):
        collection, cursor = mock_collection()
        cursor.to_list.side_effect = ServerSelectionTimeoutError("no servers")
        collection.distinct.side_effect = OperationFailure("boom")
        store = JobStore(collection)

        with self.assertRaises(InternalFailure) as ctx:
            await store.search("engineer")
        self.assertEqual(ctx.exception.message, "Search failed")

        with self.assertRaises(InternalFailure):
            await store.distinct("location")


class TestApplicationStore(unittest.IsolatedAsyncioTestCase):
    async def test_find_by_applicant(self):
        collection, _ = mock_collection([{"applicant_email": "a@b.io"}])
        store = ApplicationStore(collection)

        applications = await store.find_by_applicant("a@b.io")

        collection.find.assert_called_once_with({"applicant_email": "a@b.io"})
        self.assertEqual(len(applications), 1)

    async def test_delete_reports_count(self):
        collection, _ = mock_collection()
        collection.delete_one.return_value = MagicMock(deleted_count=0)
        store = ApplicationStore(collection)
        application_id = ObjectId()

        self.assertEqual(await store.delete(application_id), 0)
        collection.delete_one.assert_awaited_once_with({"_id": application_id})

    async def test_insert_failure(self):
        collection, _ = mock_collection()
        collection.insert_one.side_effect = OperationFailure("write failed")
        store = ApplicationStore(collection)

        with self.assertRaises(InternalFailure):
            await store.insert({"job_id": str(ObjectId())})


class TestSubscriptionStore(unittest.IsolatedAsyncioTestCase):
    async def test_subscribe_records_time(self):
        collection, _ = mock_collection()
        collection.insert_one.return_value = MagicMock(inserted_id=ObjectId())
        store = SubscriptionStore(collection)

        await store.subscribe("a@b.io")

        document = collection.insert_one.call_args.args[0]
        self.assertEqual(document["email"], "a@b.io")
        self.assertIsInstance(document["subscribedAt"], datetime)


if __name__ == "__main__":
    unittest.main()
