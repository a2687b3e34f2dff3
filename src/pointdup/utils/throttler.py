import asyncio
from asyncio import TaskGroup, Semaphore


class Throttler:
    """Limits how many tasks of a TaskGroup run at the same time.

    schedule() waits for a free permit before creating the task; the permit is returned
    when the task finishes, whether it succeeds, fails or is cancelled.
    """

    def __init__(self, task_group: TaskGroup, concurrency: int):
        """
        Args:
            task_group: The TaskGroup to which tasks will be added
            concurrency: Maximum number of tasks that can run concurrently
        """
        if concurrency < 1:
            raise ValueError(f"Concurrency must be at least 1, got {concurrency}")
        self._task_group = task_group
        self._semaphore = Semaphore(concurrency)

    async def schedule(self, coro, name=None) -> asyncio.Task:
        """Schedule a coroutine once a permit is available.

        Returns:
            The created asyncio.Task
        """
        await self._semaphore.acquire()

        async def wrapper():
            try:
                return await coro
            finally:
                self._semaphore.release()

        try:
            return self._task_group.create_task(wrapper(), name=name)
        except BaseException:
            self._semaphore.release()
            coro.close()
            raise
