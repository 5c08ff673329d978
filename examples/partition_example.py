"""Minimal example splitting work items into balanced buckets."""

from kv_morph import index_by, partition, try_partition


def main() -> None:
    """Partition a list and index the buckets by size."""
    jobs = [f"job-{number}" for number in range(1, 12)]
    buckets = partition(jobs, 4)
    for position, bucket in enumerate(buckets):
        print(f"worker {position}: {bucket}")

    print("by size:", index_by(buckets, len))
    print("invalid count:", try_partition(jobs, 0))


if __name__ == "__main__":
    main()
