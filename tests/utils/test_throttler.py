import asyncio
import unittest
from asyncio import TaskGroup

from pointdup.utils.throttler import Throttler


class ThrottlerTest(unittest.TestCase):
    def test_running_tasks_limited(self):
        running = 0
        peak = 0

        async def work():
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1

        async def run():
            async with TaskGroup() as tg:
                throttler = Throttler(tg, 2)
                for _ in range(8):
                    await throttler.schedule(work())

        asyncio.run(run())

        self.assertEqual(2, peak)
        self.assertEqual(0, running)

    def test_permits_reused_sequentially(self):
        results = []

        async def succeed(value):
            results.append(value)

        async def run():
            async with TaskGroup() as tg:
                throttler = Throttler(tg, 1)
                for value in range(3):
                    await throttler.schedule(succeed(value))

        asyncio.run(run())

        self.assertEqual([0, 1, 2], results)

    def test_permit_released_after_failure(self):
        async def fail():
            raise KeyError('boom')

        async def run():
            tg = TaskGroup()
            throttler = Throttler(tg, 1)
            with self.assertRaises(ExceptionGroup):
                async with tg:
                    await throttler.schedule(fail())
            return throttler._semaphore.locked()

        self.assertFalse(asyncio.run(run()))

    def test_task_results_returned(self):
        async def double(value):
            return value * 2

        async def run():
            async with TaskGroup() as tg:
                throttler = Throttler(tg, 4)
                tasks = [await throttler.schedule(double(i)) for i in range(5)]
            return [t.result() for t in tasks]

        self.assertEqual([0, 2, 4, 6, 8], asyncio.run(run()))

    def test_invalid_concurrency(self):
        with self.assertRaises(ValueError):
            Throttler(TaskGroup(), 0)


if __name__ == '__main__':
    unittest.main()
