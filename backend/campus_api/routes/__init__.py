"""
Campus API Backend: API Routes Package
========================================

Route Inventory (for each <resource> in articles, helprequests,
ucsbdiningcommonsmenuitems, ucsborganizations):
    GET    /api/<resource>/all     list            USER
    GET    /api/<resource>?<key>   get             USER
    POST   /api/<resource>/post    create          ADMIN
    PUT    /api/<resource>?<key>   update          ADMIN
    DELETE /api/<resource>?<key>   delete          ADMIN (helprequests only)
    GET    /health                 health check    public

Routes are THIN: they hand the raw query string / body to the controller,
which checks roles before parsing anything, and serialize whatever record
comes back.
"""
