# Utility modules for the meal planner
from .dates import parse_week_start, week_start_for, current_week_id, shift_week, week_days, weeks_in_month
from .image_handler import validate_and_process_image, remove_image, allowed_file, ImageValidationError
from .sanitizer import clean_text, sanitize_url
