"""Reading every row of a query in fixed-size, stably ordered batches."""

BATCH_SIZE = 100


def fetch_all(query, order_by="id", batch_size=BATCH_SIZE):
    """Return all records matched by `query`.

    Protean caps an unbounded `.all()` at its default page size, so larger
    result sets are read page by page. `order_by` is a field name or a list of
    them, and together they must identify a row uniquely or offsets can skip
    or repeat records.
    """
    ordered = query.order_by(order_by)
    records = []
    offset = 0
    while True:
        result = ordered.offset(offset).limit(batch_size).all()
        records.extend(result.items)
        offset += len(result.items)
        if not result.items or offset >= result.total:
            return records
