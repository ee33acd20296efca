"""
LectureLens backend.

Subtitle ingestion, embedding and retrieval for course-grounded Q&A.
"""
