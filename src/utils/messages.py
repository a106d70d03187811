"""Message mappings for API responses and notifications."""

class Messages:
    """Centralized messages for API responses."""

    # General CRUD messages
    CRUD = {
        "not_found": "Data not found",
    }

    # Identity messages
    USER = {
        "mentor_not_found": "Mentor {mentor_id} could not be resolved to an account",
        "mentee_not_found": "Mentee {mentee_id} could not be resolved to an account",
    }

    # Mentorship program messages
    PROGRAM = {
        "not_found": "Program not found or inactive",
        "not_found_with_id": "Program {program_id} not found or inactive",
        "subject_required": "Subject is required",
        "community_link_required": "Community link is required",
        "capacity_required": "Capacity is required",
        "capacity_invalid": "Capacity must be a positive integer",
        "mentor_required": "Mentor id is required",
        "mentee_required": "Mentee id is required",
        "full": "Program is full",
        "already_joined": "Already joined this program",
    }

    # Notification titles and bodies
    NOTIFICATION = {
        "not_found": "Notification not found",
        "full_title": "Program full",
        "full_body": "The mentorship program '{subject}' is full. Please try another program.",
        "already_joined_title": "Already joined",
        "already_joined_body": "You have already joined the mentorship program '{subject}'.",
        "joined_title": "Joined mentorship program",
        "joined_body": "You joined '{subject}'. Community link: {community_link}",
    }

    # Infrastructure messages
    INFRASTRUCTURE = {
        "unavailable": "Service temporarily unavailable, please retry",
    }


def get_message(category: str, key: str, **kwargs) -> str:
    """Get a message from the specified category and format it with kwargs."""
    category_messages = getattr(Messages, category.upper(), {})
    message = category_messages.get(key, f"Message not found: {category}.{key}")
    return message.format(**kwargs) if kwargs else message
