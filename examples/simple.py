from leitner_box import Card, LeitnerScheduler, Rating, configure_logging, record_review
from leitner_box.utils.time import utc_now

configure_logging()

# Box intervals in days
scheduler = LeitnerScheduler(box_intervals=[1, 2, 7], start_datetime=utc_now(), on_fail="first_box")

card = Card(card_id=1, box_number=1)

updated_card, review_log = record_review(scheduler, card, Rating.PASS, utc_now())

print(f"Updated card: {updated_card.to_dict()}")
print(f"Review log: {review_log.to_dict()}")
