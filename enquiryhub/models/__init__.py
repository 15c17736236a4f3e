# Models package - database models
from enquiryhub.models.enquiry import Enquiry, EnquiryStatus, EnquiryPriority
