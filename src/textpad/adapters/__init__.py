"""Host adapters for the document tracker."""
