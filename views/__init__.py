"""
Streamlit page renderers for the Research Lab website.

`public` holds the visitor pages, `admin` the guarded console; both take a
`PortalContainer` and read everything through it.
"""
