"""Enquiry Hub - enquiry board backend."""
