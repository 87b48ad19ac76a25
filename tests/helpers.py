"""
Shared fakes for the test suite
"""

import os
import sys
from unittest.mock import Mock

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from models import Comment


def paged_client(pages):
    """Mock client whose list_comments_page serves the given pages of Comments"""
    client = Mock()

    def list_comments_page(pull_request_number, cursor):
        next_cursor = cursor + 1 if cursor + 1 < len(pages) else None
        return pages[cursor] if pages else [], next_cursor

    client.list_comments_page.side_effect = list_comments_page
    return client


def comment(comment_id, body):
    return Comment(id=comment_id, body=body)
