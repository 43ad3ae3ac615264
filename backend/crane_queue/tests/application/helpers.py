from crane_queue.application.dtos.booking_dtos import CreateBookingRequest


def booking_request(crane="TC1", item="W-12", start=1_000, end=5_000, **extra):
    return CreateBookingRequest(
        crane=crane,
        item=item,
        requester="Somchai",
        phone="0812345678",
        purpose="Facade panel",
        start=start,
        end=end,
        **extra,
    )


def queue_of(queue_service, crane_id):
    return {item.ord: item for item in queue_service.get_crane(crane_id).queue}
