"""Terminal storefront: carousel, category ribbon, spiciness slider, product grid and cart."""
